"""
Direct interpretation of the syntax tree, one node-kind at a time.

The evaluator keeps no state of its own: everything it needs
arrives as the node and the environment to evaluate it in,
and everything it has to complain about goes to that environment's report.
Sub-expressions are evaluated strictly left to right, depth first.
"""
import math
import operator
from typing import Optional
from boozetools.support.foundation import Visitor

from .. import syntax
from ..ontology import Phrase
from ..environment import Environment
from .values import (
	RuntimeValue, NullValue, BoolValue, NumberValue, StringValue, ObjectValue,
	NULL, make_bool, make_number, make_string, make_object,
)

def _divide(a:float, b:float) -> float:
	if b: return a / b
	if a == 0 or math.isnan(a): return math.nan
	return math.copysign(math.inf, a) * math.copysign(1.0, b)

def _remainder(a:float, b:float) -> float:
	# Sign of the dividend, as in C, not as in Python.
	if b == 0 or math.isinf(a): return math.nan
	return math.fmod(a, b)

ARITHMETIC = {
	"+" : operator.add,
	"-" : operator.sub,
	"*" : operator.mul,
	"/" : _divide,
	"%" : _remainder,
}

# These render into text when either side of a `+` is a string.
_PRINTABLE = (StringValue, NumberValue, BoolValue, NullValue)

class Evaluator(Visitor):

	def evaluate(self, node, env:Environment) -> RuntimeValue:
		"""
		The one way in. Dispatch is on the exact class name with no fall-back
		to a parent class: a node kind without its own visit method gets a complaint.
		"""
		if not hasattr(self, "visit_" + type(node).__name__):
			env.report.unhandled_node(node)
			return NULL
		return self.visit(node, env)

	def visit_Program(self, program:syntax.Program, env:Environment):
		result = NULL
		for statement in program.body:
			result = self.evaluate(statement, env)
			env.report.info("last eval:", result)
		return result

	def visit_Identifier(self, expr:syntax.Identifier, env:Environment):
		return env.get(expr.symbol, expr)

	def visit_NullLiteral(self, expr:syntax.NullLiteral, env:Environment): return NULL
	def visit_BoolLiteral(self, expr:syntax.BoolLiteral, env:Environment): return make_bool(expr.value)
	def visit_StringLiteral(self, expr:syntax.StringLiteral, env:Environment): return make_string(expr.value)
	def visit_NumberLiteral(self, expr:syntax.NumberLiteral, env:Environment): return make_number(expr.value)

	def visit_ObjectLiteral(self, expr:syntax.ObjectLiteral, env:Environment):
		entries = []
		for p in expr.properties:
			if p.value is None: value = env.get(p.key, p)
			else: value = self.evaluate(p.value, env)
			entries.append((p.key, value))
		return make_object(entries)

	def visit_VariableDeclaration(self, decl:syntax.VariableDeclaration, env:Environment):
		value = NULL if decl.value is None else self.evaluate(decl.value, env)
		return env.declare(decl.name, value, decl.locked, decl)

	def visit_BinaryExpression(self, expr:syntax.BinaryExpression, env:Environment):
		lhs = self.evaluate(expr.lhs, env)
		rhs = self.evaluate(expr.rhs, env)
		return self.apply_operator(expr.op, lhs, rhs, expr, env)

	@staticmethod
	def apply_operator(op:str, lhs:RuntimeValue, rhs:RuntimeValue, site:Phrase, env:Environment) -> RuntimeValue:
		if op not in ARITHMETIC:
			env.report.unknown_operator(op, site)
			return NULL
		if isinstance(lhs, NumberValue) and isinstance(rhs, NumberValue):
			return make_number(ARITHMETIC[op](lhs.value, rhs.value))
		if op == "+" and isinstance(lhs, _PRINTABLE) and isinstance(rhs, _PRINTABLE):
			if isinstance(lhs, StringValue) or isinstance(rhs, StringValue):
				return make_string(str(lhs) + str(rhs))
		env.report.type_mismatch(op, lhs, rhs, site)
		return NULL

	def visit_AssignmentExpression(self, expr:syntax.AssignmentExpression, env:Environment):
		target = expr.target
		if isinstance(target, syntax.Identifier):
			value = self.evaluate(expr.value, env)
			return env.set(target.symbol, value, expr)
		if isinstance(target, syntax.MemberExpression):
			obj = self.evaluate(target.obj, env)
			key = self._member_key(target, env)
			value = self.evaluate(expr.value, env)
			address = self._address(obj, key, target, env)
			if address is None: return NULL
			prop, index = address
			return env.set_property(obj, prop, value, target, index)
		self.evaluate(expr.value, env)
		env.report.invalid_assignment_target(expr)
		return NULL

	def visit_MemberExpression(self, expr:syntax.MemberExpression, env:Environment):
		obj = self.evaluate(expr.obj, env)
		key = self._member_key(expr, env)
		address = self._address(obj, key, expr, env)
		if address is None: return NULL
		prop, index = address
		return env.get_property(obj, prop, expr, index)

	def _member_key(self, expr:syntax.MemberExpression, env:Environment) -> RuntimeValue:
		if not expr.computed:
			return make_string(expr.prop.symbol)
		return self.evaluate(expr.prop, env)

	@staticmethod
	def _address(obj:RuntimeValue, key:RuntimeValue, site:syntax.MemberExpression, env:Environment) -> Optional[tuple[Optional[str], Optional[float]]]:
		"""
		Work out which property a member-expression means, as (name, position).
		Exactly one of the two is filled in. None means trouble, already reported:
		one complaint per expression, and the object gets checked before the key.
		"""
		if not isinstance(obj, ObjectValue):
			env.report.not_an_object(obj, site)
			return None
		if isinstance(key, NumberValue): return None, key.value
		if isinstance(key, StringValue): return key.value, None
		env.report.bad_key(key, site)
		return None

EVALUATOR = Evaluator()

def evaluate(node:Phrase, env:Environment) -> RuntimeValue:
	""" Entry point for drivers: evaluate one node (usually a Program) in a given scope. """
	return EVALUATOR.evaluate(node, env)
