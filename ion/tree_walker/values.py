"""
This module defines the tagged values the tree-walker operates in terms of.

Unlike some runtimes, primitive Python values do not play themselves here:
every result carries its kind, so that `1` and `true` stay distinct and
there is always something (at worst, null) to hand back.
"""
import math
from abc import ABC, abstractmethod
from typing import Iterable, Mapping, Tuple, Union

class RuntimeValue(ABC):
	""" Root of the closed family of run-time values """
	__slots__ = ()
	kind : str

	@abstractmethod
	def __str__(self): pass

	def quoted(self) -> str:
		""" How this value looks when nested inside an object """
		return str(self)

class NullValue(RuntimeValue):
	__slots__ = ()
	kind = "null"
	_instance = None
	def __new__(cls):
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance
	def __repr__(self): return "NULL"
	def __str__(self): return "null"
	def __bool__(self): return False

NULL = NullValue()

class _Scalar(RuntimeValue):
	""" Immutable kind-plus-payload; equal only to the same kind with the same payload. """
	__slots__ = ("_value",)
	def __init__(self, value):
		object.__setattr__(self, "_value", value)
	@property
	def value(self): return self._value
	def __setattr__(self, key, value): raise AttributeError("%s is immutable" % self.kind)
	def __eq__(self, other):
		return type(other) is type(self) and other._value == self._value
	def __ne__(self, other): return not self == other
	def __hash__(self): return hash((self.kind, self._value))
	def __repr__(self): return "%s(%r)" % (type(self).__name__, self._value)

class BoolValue(_Scalar):
	__slots__ = ()
	kind = "bool"
	def __str__(self): return "true" if self._value else "false"

class NumberValue(_Scalar):
	__slots__ = ()
	kind = "number"
	def __str__(self): return render_number(self._value)

class StringValue(_Scalar):
	__slots__ = ()
	kind = "string"
	def __str__(self): return self._value
	def quoted(self): return '"%s"' % self._value.replace('"', '\\"')

class ObjectValue(RuntimeValue):
	"""
	The value is an insertion-ordered dict, and it belongs to this object.
	Property assignment mutates it in place, so two references to one object
	see the same change. Equality is identity.
	"""
	__slots__ = ("value",)
	kind = "object"
	def __init__(self, value:dict):
		assert isinstance(value, dict), type(value)
		self.value = value
	def __str__(self):
		if not self.value: return "{}"
		inner = ", ".join("%s: %s" % (k, v.quoted()) for k, v in self.value.items())
		return "{ %s }" % inner
	def __repr__(self): return "ObjectValue(%r)" % self.value
	def keys(self) -> list[str]: return list(self.value)
	def key_at(self, index:int) -> str:
		""" The key in ordinal position `index`; IndexError when there's none """
		if index < 0: raise IndexError(index)
		return self.keys()[index]

def render_number(n:float) -> str:
	if math.isnan(n): return "NaN"
	if math.isinf(n): return "Infinity" if n > 0 else "-Infinity"
	if n == int(n) and abs(n) < 1e21: return str(int(n))
	return repr(n)

###############################################################################

def make_null() -> NullValue: return NULL

def make_bool(b:bool) -> BoolValue:
	if not isinstance(b, bool): raise TypeError("a bool needs a bool, not %r" % (b,))
	return BoolValue(b)

def make_number(n:Union[int, float]) -> NumberValue:
	if isinstance(n, bool) or not isinstance(n, (int, float)):
		raise TypeError("a number needs an int or float, not %r" % (n,))
	try: return NumberValue(float(n))
	except OverflowError:
		# An int past the largest double rounds off to infinity, as the arithmetic does.
		return NumberValue(math.inf if n > 0 else -math.inf)

def make_string(s:str) -> StringValue:
	if not isinstance(s, str): raise TypeError("a string needs a str, not %r" % (s,))
	return StringValue(s)

ENTRIES = Union[Mapping[str, RuntimeValue], Iterable[Tuple[str, RuntimeValue]]]

def make_object(entries:ENTRIES=()) -> ObjectValue:
	"""
	Keys keep the position of their first appearance;
	a repeated key just takes the later value.
	"""
	pairs = entries.items() if isinstance(entries, Mapping) else entries
	table = {}
	for key, value in pairs:
		if not isinstance(key, str): raise TypeError("property names are strings, not %r" % (key,))
		if not isinstance(value, RuntimeValue): raise TypeError("%r is not a run-time value" % (value,))
		table[key] = value
	return ObjectValue(table)
