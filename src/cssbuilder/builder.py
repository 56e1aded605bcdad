# encoding=utf8 ---------------------------------------------------------------
# Project           : CSSBuilder
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 02-Oct-2026
# Last modification : 16-Oct-2026
# -----------------------------------------------------------------------------

from .model import SelectorBuilder, render

__doc__ = """
The facade to the selector builder. Each function creates a new
`SelectorBuilder` and invokes the operation of the same name on it, so that
selectors can be written as chains:

>>> id("main").class_("container").class_("editable").render()
'#main.container.editable'
>>> element("a").attr('href$=".png"').pseudoClass("focus").render()
'a[href$=".png"]:focus'
"""

def element( value ):
	return SelectorBuilder().element(value)

def id( value ):
	return SelectorBuilder().id(value)

def class_( value ):
	return SelectorBuilder().class_(value)

def attribute( value ):
	return SelectorBuilder().attribute(value)

def attr( value ):
	return SelectorBuilder().attr(value)

def pseudoClass( value ):
	return SelectorBuilder().pseudoClass(value)

def pseudoElement( value ):
	return SelectorBuilder().pseudoElement(value)

def combine( left, combinator, right ):
	return SelectorBuilder().combine(left, combinator, right)

def group( *selectors ):
	"""Renders the given selectors as a selector list."""
	return ", ".join(render(_) for _ in selectors)

# EOF - vim: ts=4 sw=4 noet
