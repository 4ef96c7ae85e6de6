"""
Everything the runtime has to say about a program that goes wrong.

Nothing in the runtime raises on account of the program being evaluated.
Instead, whoever spots trouble calls the matching method on the Report,
and then carries on with null as a placeholder. The caller decides
afterward whether the issues matter.
"""
import sys
from typing import Optional, Sequence
from boozetools.support.failureprone import illustration

from .ontology import Phrase
from . import syntax

DUPLICATE_DECLARATION = "AT2001"
ASSIGN_TO_LOCKED = "AT2002"
UNRESOLVED_NAME = "AT2003"
UNKNOWN_PROPERTY = "AT2004"
TYPE_MISMATCH = "AT2005"
UNKNOWN_OPERATOR = "AT2006"
INVALID_ASSIGNMENT_TARGET = "AT2007"
UNHANDLED_NODE_KIND = "AT_UNKNOWN"

class Diagnostic:
	""" One issue, pinned to the phrase that provoked it. """
	def __init__(self, kind:str, code:str, message:str, site:Phrase):
		self.kind, self.code, self.message = kind, code, message
		self.line, self.column = site.line, site.column

	def __repr__(self): return "<%s %s @%d:%d>" % (self.kind, self.code, self.line, self.column)

	def as_text(self, source_lines:Sequence[str]=()):
		lines = [
			"Runtime Error: %s" % self.message,
			"at => line:%d, column:%d, error code:%s" % (self.line, self.column, self.code),
		]
		if 0 < self.line <= len(source_lines):
			single_line = source_lines[self.line - 1]
			col = max(self.column - 1, 0)
			lines.append(illustration(single_line, col, 1, prefix='% 6d |' % self.line, caption=self.kind))
		return '\n'.join(lines)

class Report:
	"""
	The diagnostic sink handed to a root Environment.
	Child scopes share their parent's report, so one evaluation session
	collects everything in one place.
	"""
	_issues : list[Diagnostic]

	def __init__(self, *, verbose:int=0, source:Optional[str]=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._source_lines = source.splitlines() if source else []

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self) -> list[Diagnostic]: return list(self._issues)

	def codes(self) -> list[str]: return [i.code for i in self._issues]

	def issue(self, it:Diagnostic):
		self._issues.append(it)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def error(self, kind:str, code:str, site:Phrase, msg:str):
		""" Actually make an entry of an issue """
		assert isinstance(site, Phrase), site
		self.issue(Diagnostic(kind, code, msg, site))

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
			plural = '' if len(self._issues) == 1 else 's'
			print("%d runtime issue%s:" % (len(self._issues), plural), file=sys.stderr)
		for i in self._issues:
			print("  -"*20, file=sys.stderr)
			print(i.as_text(self._source_lines), file=sys.stderr)
		sys.stderr.flush()

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(message)

	# Methods the environment calls:

	def duplicate_declaration(self, name:str, site:Phrase):
		self.error("DuplicateDeclaration", DUPLICATE_DECLARATION, site, "var:%s is already declared" % name)

	def assign_to_locked(self, name:str, site:Phrase):
		self.error("AssignToLocked", ASSIGN_TO_LOCKED, site, "cannot assign a value to locked var:%s" % name)

	def undefined_name(self, name:str, site:Phrase):
		self.error("UnresolvedName", UNRESOLVED_NAME, site, "cannot resolve %s" % name)

	def unknown_property(self, prop:str, site:Phrase):
		pattern = "object %s doesn't contain property %s"
		self.error("UnknownProperty", UNKNOWN_PROPERTY, site, pattern % (_object_name(site), prop))

	def no_such_position(self, index, size:int, site:Phrase):
		pattern = "object %s has no property at position %s (it has %d)"
		self.error("UnknownProperty", UNKNOWN_PROPERTY, site, pattern % (_object_name(site), index, size))

	# Methods the evaluator calls:

	def type_mismatch(self, op:str, lhs, rhs, site:Phrase):
		pattern = "operator %s does not apply to %s and %s"
		self.error("TypeMismatch", TYPE_MISMATCH, site, pattern % (op, lhs.kind, rhs.kind))

	def not_an_object(self, value, site:Phrase):
		msg = "%s is a %s, not an object; it has no properties" % (_object_name(site), value.kind)
		self.error("TypeMismatch", TYPE_MISMATCH, site, msg)

	def bad_key(self, key, site:Phrase):
		msg = "a property key must be a number or a string, not a %s" % key.kind
		self.error("TypeMismatch", TYPE_MISMATCH, site, msg)

	def unknown_operator(self, op:str, site:Phrase):
		self.error("UnknownOperator", UNKNOWN_OPERATOR, site, "there is no operator %r" % op)

	def invalid_assignment_target(self, site:syntax.AssignmentExpression):
		msg = "cannot assign to a %s" % site.target.kind
		self.error("InvalidAssignmentTarget", INVALID_ASSIGNMENT_TARGET, site, msg)

	def unhandled_node(self, site):
		# A stray non-phrase still gets reported; it just has no position.
		kind = type(site).__name__
		where = site if isinstance(site, Phrase) else syntax.NullLiteral()
		msg = "unknown error please report this: nothing evaluates a %s" % kind
		self.error("UnhandledNodeKind", UNHANDLED_NODE_KIND + ":" + kind, where, msg)

def _object_name(site:Phrase) -> str:
	""" Best available name for the object a member-expression talks about """
	if isinstance(site, syntax.AssignmentExpression): site = site.target
	if isinstance(site, syntax.MemberExpression):
		if isinstance(site.obj, syntax.Identifier): return site.obj.symbol
		return repr(site.obj)
	return "object"
