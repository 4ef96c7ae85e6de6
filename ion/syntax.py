"""
The set of parse-nodes in simple form.
The parser calls these constructors with subordinate semantic-values in a bottom-up tree transduction.
Each node's class name is its kind tag; the evaluator dispatches on exactly that.
Positions default to NOWHERE so that tests and tools can build trees by hand.
"""
from typing import Optional, Sequence
from .ontology import Phrase, ValueExpression, Position, NOWHERE

class Identifier(ValueExpression):
	def __init__(self, symbol: str, pos: Position = NOWHERE):
		assert isinstance(symbol, str), type(symbol)
		super().__init__(pos)
		self.symbol = symbol
	def __repr__(self): return "<Identifier %s>" % self.symbol

class NullLiteral(ValueExpression):
	def __init__(self, pos: Position = NOWHERE):
		super().__init__(pos)
	def __repr__(self): return "<NullLiteral>"

class Literal(ValueExpression):
	value: object
	def __init__(self, value, pos: Position = NOWHERE):
		super().__init__(pos)
		self.value = value
	def __repr__(self): return "<%s %r>" % (self.kind, self.value)

class BoolLiteral(Literal):
	def __init__(self, value: bool, pos: Position = NOWHERE):
		assert isinstance(value, bool), type(value)
		super().__init__(value, pos)

class NumberLiteral(Literal):
	def __init__(self, value: float, pos: Position = NOWHERE):
		assert isinstance(value, (int, float)) and not isinstance(value, bool), type(value)
		super().__init__(value, pos)

class StringLiteral(Literal):
	def __init__(self, value: str, pos: Position = NOWHERE):
		assert isinstance(value, str), type(value)
		super().__init__(value, pos)

def truth(pos: Position = NOWHERE): return BoolLiteral(True, pos)
def falsehood(pos: Position = NOWHERE): return BoolLiteral(False, pos)

class Property(Phrase):
	"""
	One `key: value` entry of an object literal.
	A missing value is the shorthand `{ key }`, meaning the variable called `key`.
	Not a value-expression in its own right; only ObjectLiteral evaluates these.
	"""
	def __init__(self, key: str, value: Optional[ValueExpression] = None, pos: Position = NOWHERE):
		assert isinstance(key, str), type(key)
		super().__init__(pos)
		self.key, self.value = key, value
	def __repr__(self): return "<Property %s>" % self.key

class ObjectLiteral(ValueExpression):
	def __init__(self, properties: Sequence[Property], pos: Position = NOWHERE):
		for p in properties:
			assert isinstance(p, Property), p
		super().__init__(pos)
		self.properties = list(properties)

class VariableDeclaration(ValueExpression):
	""" `let name = value` or, when locked, `const name = value` """
	def __init__(self, name: str, value: Optional[ValueExpression], locked: bool = False, pos: Position = NOWHERE):
		super().__init__(pos)
		self.name, self.value, self.locked = name, value, locked
	def __repr__(self):
		return "<%s %s>" % ("const" if self.locked else "let", self.name)

class BinaryExpression(ValueExpression):
	def __init__(self, lhs: ValueExpression, op: str, rhs: ValueExpression, pos: Optional[Position] = None):
		super().__init__(lhs.pos if pos is None else pos)
		self.lhs, self.op, self.rhs = lhs, op, rhs
	def __repr__(self): return "(%r %s %r)" % (self.lhs, self.op, self.rhs)

class MemberExpression(ValueExpression):
	"""
	Either `obj.name`, where `prop` is an Identifier naming the property,
	or `obj[key]` (computed) where `prop` is any expression:
	a number key means ordinal position, a string key means the name.
	"""
	def __init__(self, obj: ValueExpression, prop: ValueExpression, computed: bool = False, pos: Optional[Position] = None):
		assert computed or isinstance(prop, Identifier), prop
		super().__init__(obj.pos if pos is None else pos)
		self.obj, self.prop, self.computed = obj, prop, computed
	def __repr__(self):
		if self.computed: return "%r[%r]" % (self.obj, self.prop)
		return "%r.%s" % (self.obj, self.prop.symbol)

class AssignmentExpression(ValueExpression):
	def __init__(self, target: ValueExpression, value: ValueExpression, pos: Optional[Position] = None):
		super().__init__(target.pos if pos is None else pos)
		self.target, self.value = target, value
	def __repr__(self): return "(%r = %r)" % (self.target, self.value)

class Program(Phrase):
	def __init__(self, body: Sequence[Phrase], pos: Position = NOWHERE):
		super().__init__(pos)
		self.body = list(body)
