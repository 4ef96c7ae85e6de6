"""
These most-fundamental classes in the syntax class hierarchy
are separate from the rest to avoid circular imports:
the diagnostics module needs to know what a phrase is,
and the syntax module needs nothing from diagnostics.
"""
from typing import NamedTuple

class Position(NamedTuple):
	""" One-based line and column where a phrase begins. """
	line: int
	column: int
	def __str__(self): return "line:%d, column:%d" % self

# Zero-position means a synthetic node that came from no source text.
NOWHERE = Position(0, 0)

class Phrase:
	"""
	Root of everything the evaluator can be handed.
	The scanner stamps each token with a position, and the parser
	copies the position of a phrase's first token into the phrase.
	"""
	pos: Position
	def __init__(self, pos: Position):
		assert isinstance(pos, Position), type(pos)
		self.pos = pos
	@property
	def kind(self) -> str: return type(self).__name__
	@property
	def line(self) -> int: return self.pos.line
	@property
	def column(self) -> int: return self.pos.column

class ValueExpression(Phrase): pass
