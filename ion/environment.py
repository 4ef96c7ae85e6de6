"""
Scopes for the run-time: the canonical list-structured search.

Each Environment is one lexical scope. It knows its own bindings,
which of them are locked, and the scope it sits inside of.
Whoever opened a scope owns it. A child only looks outward through
its parent; it never clears or replaces anything there.
"""
from typing import Optional

from .ontology import Phrase
from .diagnostics import Report
from .tree_walker.values import RuntimeValue, ObjectValue, NULL

class Environment:
	_bindings : dict[str, RuntimeValue]
	_locked : set[str]
	parent : Optional["Environment"]   # The enclosing scope; None at the root.

	def __init__(self, report:Report, parent:Optional["Environment"]=None):
		assert isinstance(report, Report), type(report)
		assert parent is None or isinstance(parent, Environment), type(parent)
		self.report = report
		self._bindings = {}
		self._locked = set()
		self.parent = parent

	def child(self) -> "Environment":
		return Environment(self.report, self)

	def __contains__(self, name:str) -> bool:
		return name in self._bindings

	def names(self) -> list[str]:
		return list(self._bindings)

	def is_locked(self, name:str) -> bool:
		return name in self._locked

	# -- Variables ------------------------------------------------------

	def resolve(self, name:str, site:Phrase) -> Optional["Environment"]:
		""" Nearest scope, starting here, that binds the name. Complains if there's none. """
		env = self
		while env is not None:
			if name in env._bindings: return env
			env = env.parent
		self.report.undefined_name(name, site)
		return None

	def declare(self, name:str, value:RuntimeValue, locked:bool, site:Phrase) -> RuntimeValue:
		# Only this scope counts: shadowing an outer name is fine.
		if name in self._bindings:
			self.report.duplicate_declaration(name, site)
			return NULL
		self._bindings[name] = value
		if locked: self._locked.add(name)
		return value

	def get(self, name:str, site:Phrase) -> RuntimeValue:
		env = self.resolve(name, site)
		if env is None: return NULL
		return env._bindings[name]

	def set(self, name:str, value:RuntimeValue, site:Phrase) -> RuntimeValue:
		env = self.resolve(name, site)
		if env is None: return NULL
		if name in env._locked:
			self.report.assign_to_locked(name, site)
			return NULL
		env._bindings[name] = value
		return value

	# -- Object properties ----------------------------------------------
	#
	# An index that is not None always means ordinal position, including zero.
	# Otherwise the property goes by name.

	def get_property(self, obj:ObjectValue, prop:str, site:Phrase, index:Optional[int]=None) -> RuntimeValue:
		key = self._find_key(obj, prop, site, index)
		if key is None: return NULL
		return obj.value[key]

	def set_property(self, obj:ObjectValue, prop:str, value:RuntimeValue, site:Phrase, index:Optional[int]=None) -> RuntimeValue:
		key = self._find_key(obj, prop, site, index)
		if key is None: return NULL
		obj.value[key] = value
		return value

	def _find_key(self, obj:ObjectValue, prop:str, site:Phrase, index:Optional[int]) -> Optional[str]:
		assert isinstance(obj, ObjectValue), type(obj)
		if index is not None:
			if isinstance(index, float) and index.is_integer(): index = int(index)
			if isinstance(index, int) and not isinstance(index, bool):
				try: return obj.key_at(index)
				except IndexError: pass
			self.report.no_such_position(index, len(obj.value), site)
			return None
		if prop in obj.value:
			return prop
		self.report.unknown_property(prop, site)
		return None
