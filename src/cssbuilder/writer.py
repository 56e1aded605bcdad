# encoding=utf8 ---------------------------------------------------------------
# Project           : CSSBuilder
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 03-Oct-2026
# Last modification : 16-Oct-2026
# -----------------------------------------------------------------------------

import sys, types, io
from .model import TSelector, render

# -----------------------------------------------------------------------------
#
# SELECTOR WRITER
#
# -----------------------------------------------------------------------------

class SelectorWriter( object ):
	"""Writes selectors to an output stream, several selectors being
	written as a selector list."""

	def __init__( self, output=sys.stdout ):
		self.output = output

	def write( self, selectors ):
		for _ in self.on(selectors):
			self._write(_)
		self.output.flush()
		return self

	def _write( self, value ):
		# NOTE: Text streams take `str`, anything else is assumed to be binary
		if isinstance(self.output, io.TextIOBase):
			self._writeUnicode(value)
		else:
			self._writeBinary(value)

	def _writeUnicode( self, value ):
		if isinstance(value, (types.GeneratorType, list, tuple)):
			for _ in value: self._writeUnicode(_)
		elif isinstance(value, str):
			self.output.write(value)
		elif isinstance(value, bytes):
			self.output.write(value.decode("utf-8"))
		elif value:
			raise ValueError("Does not know how to write value: `{0}`".format(repr(value)))

	def _writeBinary( self, value ):
		if isinstance(value, (types.GeneratorType, list, tuple)):
			for _ in value: self._writeBinary(_)
		elif isinstance(value, str):
			self.output.write(value.encode("utf-8"))
		elif isinstance(value, bytes):
			self.output.write(value)
		elif value:
			raise ValueError("Does not know how to write value: `{0}`".format(repr(value)))

	def on( self, element ):
		if isinstance(element, (types.GeneratorType, list, tuple)):
			yield self.onList(element)
		elif isinstance(element, (TSelector, str, bytes)):
			yield self.onSelector(element)
			yield "\n"
		else:
			raise ValueError("SelectorWriter.write: {0} not supported".format(repr(element)))

	def onList( self, elements ):
		for i, _ in enumerate(elements):
			if i > 0:
				yield ",\n"
			yield self.onSelector(_)
		yield "\n"

	def onSelector( self, element ):
		yield render(element)

# EOF - vim: ts=4 sw=4 noet
