#!/usr/bin/env python
# encoding=utf8 ---------------------------------------------------------------
# Project           : CSSBuilder
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 03-Oct-2026
# Last modification : 16-Oct-2026
# -----------------------------------------------------------------------------

import sys, argparse
from  .model   import SelectorBuilder, SelectorError, ELEMENT, ID, CLASS, ATTRIBUTE, PSEUDO_CLASS, PSEUDO_ELEMENT
from  .builder import combine
from  .writer  import SelectorWriter

try:
	import reporter
	logging = reporter.bind("cssbuilder")
except ImportError:
	import logging

COMBINE = "combine"
GROUP   = "group"

class Fragment(argparse.Action):
	"""Records options in the `fragments` list, preserving the order in which
	they were given on the command line."""

	def __call__( self, parser, namespace, values, option_string=None ):
		fragments = getattr(namespace, "fragments", None) or []
		fragments.append((self.const, values))
		setattr(namespace, "fragments", fragments)

def build( fragments ):
	"""Builds the list of selectors described by the given `(kind, value)`
	fragments. `combine` fragments join the current compound selector with
	the next one, `group` fragments start a new selector."""
	selectors = []
	current   = None
	compound  = None
	operator  = None
	for kind, value in fragments:
		if kind == GROUP:
			if compound is not None:
				selectors.append(combine(current, operator, compound) if current is not None else compound)
			elif current is not None:
				selectors.append(current)
			current = compound = operator = None
		elif kind == COMBINE:
			if compound is not None:
				current  = combine(current, operator, compound) if current is not None else compound
				compound = None
			else:
				logging.error("Ignoring combinator `{0}`: no selector to combine before it".format(value))
				continue
			operator = value
		else:
			logging.debug("Adding {0} `{1}`".format(kind, value))
			if compound is None: compound = SelectorBuilder()
			compound.append(kind, value)
	if compound is not None:
		selectors.append(combine(current, operator, compound) if current is not None else compound)
	elif current is not None:
		selectors.append(current)
	return selectors

def run(args):
	"""Processes the command line arguments."""
	USAGE = "cssbuilder [-e ELEMENT] [-i ID] [-c CLASS]... [-a ATTR]... [-p PSEUDO]... [-P PSEUDO] [-C OP ...] [-g ...]"
	if type(args) not in (type([]), type(())): args = [args]
	oparser = argparse.ArgumentParser(
		prog        = "cssbuilder",
		description = "Builds CSS selectors from fragments"
	)
	oparser.add_argument("-e", "--element",        action=Fragment, const=ELEMENT,        metavar="NAME", help="The element (type) selector")
	oparser.add_argument("-i", "--id",             action=Fragment, const=ID,             metavar="NAME", help="The id selector")
	oparser.add_argument("-c", "--class",          action=Fragment, const=CLASS,          metavar="NAME", help="A class selector")
	oparser.add_argument("-a", "--attribute",      action=Fragment, const=ATTRIBUTE,      metavar="SPEC", help="An attribute selector, without the brackets")
	oparser.add_argument("-p", "--pseudo-class",   action=Fragment, const=PSEUDO_CLASS,   metavar="NAME", help="A pseudo-class selector")
	oparser.add_argument("-P", "--pseudo-element", action=Fragment, const=PSEUDO_ELEMENT, metavar="NAME", help="The pseudo-element selector")
	oparser.add_argument("-C", "--combine",        action=Fragment, const=COMBINE,        metavar="OP",   help="Combines the previous and next selectors with OP")
	oparser.add_argument("-g", "--group",          action=Fragment, const=GROUP,          nargs=0,        help="Starts a new selector in the selector list")
	oparser.add_argument("-v", "--verbose",  dest="verbose",  action="store_true", default=False)
	oparser.add_argument("-o", "--output",   type=str,  dest="output", default=None)
	# We create the parse and register the options
	args = oparser.parse_args(args=args)
	fragments = getattr(args, "fragments", None) or []
	if not fragments:
		sys.stderr.write(USAGE + "\n")
		return []
	if args.verbose and hasattr(logging, "basicConfig"):
		logging.basicConfig(level=logging.DEBUG)
		logging.getLogger().setLevel(logging.DEBUG)
	try:
		selectors = build(fragments)
	except SelectorError as e:
		logging.error("Could not build selector: {0}".format(e))
		return None
	output = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
	try:
		SelectorWriter(output=output).write(selectors)
	finally:
		if args.output:
			output.close()
	return [_.render() for _ in selectors]

if __name__ == "__main__":
	sys.exit(0 if run(sys.argv[1:]) is not None else 1)

# EOF - vim: ts=4 sw=4 noet
