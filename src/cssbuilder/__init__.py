#!/usr/bin/env python
# encoding=utf8 ---------------------------------------------------------------
# Project           : CSSBuilder
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 02-Oct-2026
# Last modification : 16-Oct-2026
# -----------------------------------------------------------------------------

from .model   import TSelector, SelectorBuilder, SelectorError, DuplicateFragmentError, OutOfOrderFragmentError
from .builder import element, id, class_, attribute, attr, pseudoClass, pseudoElement, combine, group
from .writer  import SelectorWriter
from .command import run

VERSION    = "0.1.0"
LICENSE    = "http://ffctn.com/doc/licenses/bsd"

__doc__ = """
Builds CSS selectors by chaining fragments, making sure that element, id and
pseudo-element occur at most once and that fragments come in the order
mandated by CSS: element, id, class, attribute, pseudo-class, pseudo-element.
"""

if __name__ == "__main__":
	import sys
	run(sys.argv[1:])

# EOF
