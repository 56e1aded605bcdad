# encoding=utf8 ---------------------------------------------------------------
# Project           : CSSBuilder
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 02-Oct-2026
# Last modification : 16-Oct-2026
# -----------------------------------------------------------------------------

__doc__ = """
Defines the selector model: the fragment kinds, their ordering and the
`SelectorBuilder` that accumulates them into a compound or complex selector.

```
element#id.class[attr]:pseudoClass::pseudoElement
          \\----/\\----/\\----------/
          Can be several occurrences
```
"""

ELEMENT        = "element"
ID             = "id"
CLASS          = "class"
ATTRIBUTE      = "attribute"
PSEUDO_CLASS   = "pseudoClass"
PSEUDO_ELEMENT = "pseudoElement"

# The order in which fragments must appear within a compound selector
KIND_RANK = {
	ELEMENT        : 0,
	ID             : 1,
	CLASS          : 2,
	ATTRIBUTE      : 3,
	PSEUDO_CLASS   : 4,
	PSEUDO_ELEMENT : 5,
}

# (prefix, suffix) wrapped around the fragment value
KIND_DELIMITERS = {
	ELEMENT        : ("",   ""),
	ID             : ("#",  ""),
	CLASS          : (".",  ""),
	ATTRIBUTE      : ("[",  "]"),
	PSEUDO_CLASS   : (":",  ""),
	PSEUDO_ELEMENT : ("::", ""),
}

# Kinds that may occur at most once in a compound selector
SINGLETON_KINDS = (ELEMENT, ID, PSEUDO_ELEMENT)

NO_RANK = -1

class SelectorError(Exception):
	pass

class DuplicateFragmentError(SelectorError):

	def __init__( self, kind=None ):
		SelectorError.__init__(self, "Element, id and pseudo-element should not occur more than one time inside the selector")
		self.kind = kind

class OutOfOrderFragmentError(SelectorError):

	def __init__( self, kind=None, after=None ):
		SelectorError.__init__(self, "Selector parts should be arranged in the following order: element, id, class, attribute, pseudo-class, pseudo-element")
		self.kind  = kind
		self.after = after

def asText( value ):
	"""Returns the given fragment value as a string."""
	if isinstance(value, bytes):
		return value.decode("utf-8")
	elif isinstance(value, str):
		return value
	else:
		return str(value)

# -----------------------------------------------------------------------------
#
# SELECTOR TRAIT
#
# -----------------------------------------------------------------------------

class TSelector(object):
	"""Trait listing the operations every selector responds to. Fragment
	operations return the selector itself so that calls can be chained."""

	def element( self, name ):
		raise NotImplementedError("{0}.element not implemented".format(self.__class__.__name__))

	def id( self, name ):
		raise NotImplementedError("{0}.id not implemented".format(self.__class__.__name__))

	def class_( self, name ):
		raise NotImplementedError("{0}.class_ not implemented".format(self.__class__.__name__))

	def attribute( self, spec ):
		raise NotImplementedError("{0}.attribute not implemented".format(self.__class__.__name__))

	def pseudoClass( self, name ):
		raise NotImplementedError("{0}.pseudoClass not implemented".format(self.__class__.__name__))

	def pseudoElement( self, name ):
		raise NotImplementedError("{0}.pseudoElement not implemented".format(self.__class__.__name__))

	def combine( self, left, combinator, right ):
		raise NotImplementedError("{0}.combine not implemented".format(self.__class__.__name__))

	def render( self ):
		raise NotImplementedError("{0}.render not implemented".format(self.__class__.__name__))

	def attr( self, spec ):
		return self.attribute(spec)

	def __str__( self ):
		return self.render()

# -----------------------------------------------------------------------------
#
# SELECTOR BUILDER
#
# -----------------------------------------------------------------------------

class SelectorBuilder(TSelector):
	"""Accumulates the fragments of a selector in place. A builder belongs
	to a single call chain and is consumed by `render()`: appending fragments
	after rendering is not supported."""

	def __init__( self ):
		self._text  = ""
		self._kinds = set()
		self._rank  = NO_RANK

	@property
	def text( self ):
		return self._text

	@property
	def kinds( self ):
		return frozenset(self._kinds)

	@property
	def rank( self ):
		return self._rank

	def element( self, name ):
		return self.append(ELEMENT, name)

	def id( self, name ):
		return self.append(ID, name)

	def class_( self, name ):
		return self.append(CLASS, name)

	def attribute( self, spec ):
		return self.append(ATTRIBUTE, spec)

	def pseudoClass( self, name ):
		return self.append(PSEUDO_CLASS, name)

	def pseudoElement( self, name ):
		return self.append(PSEUDO_ELEMENT, name)

	def append( self, kind, value ):
		"""Appends a fragment of the given kind, making sure that singleton
		kinds only occur once and that kinds never go down in rank."""
		rank = KIND_RANK[kind]
		if kind in SINGLETON_KINDS and kind in self._kinds:
			raise DuplicateFragmentError(kind)
		if rank < self._rank:
			raise OutOfOrderFragmentError(kind, self.lastKind())
		prefix, suffix = KIND_DELIMITERS[kind]
		self._text += prefix + asText(value) + suffix
		self._rank  = rank
		self._kinds.add(kind)
		return self

	def lastKind( self ):
		for kind, rank in KIND_RANK.items():
			if rank == self._rank:
				return kind
		return None

	def combine( self, left, combinator, right ):
		# NOTE: The ordering state is left untouched, only the text is set
		self._text = "{0} {1} {2}".format(render(left), asText(combinator), render(right))
		return self

	def render( self ):
		return self._text

	def __repr__( self ):
		return "<SelectorBuilder `{0}` at {1}>".format(self._text, id(self))

def render( selector ):
	"""Renders the given selector, strings being taken as already rendered."""
	if isinstance(selector, TSelector):
		return selector.render()
	elif isinstance(selector, (str, bytes)):
		return asText(selector)
	elif hasattr(selector, "render"):
		return selector.render()
	else:
		raise ValueError("Cannot render selector: `{0}`".format(repr(selector)))

# EOF - vim: ts=4 sw=4 noet
