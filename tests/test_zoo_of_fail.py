import io
import unittest
from unittest import mock

from ion import syntax, diagnostics
from ion.ontology import Position
from ion.diagnostics import Report, Diagnostic
from ion.environment import Environment
from ion.tree_walker.executive import run_program

def at(line, col): return Position(line, col)
def num(n, pos=at(0, 0)): return syntax.NumberLiteral(n, pos)
def ident(name, pos=at(0, 0)): return syntax.Identifier(name, pos)

class Silence(Report):
	def __init__(self, **kwargs):
		super().__init__(**kwargs)
		self.complain_to_console = mock.Mock()

def _codes_from(*statements):
	report = Silence()
	run_program(syntax.Program(statements), report)
	assert 0 == report.complain_to_console.call_count
	return report.codes()

class ZooOfFail(unittest.TestCase):
	""" Tests that assert about failure modes. """

	def test_each_code(self):
		obj = syntax.ObjectLiteral([syntax.Property("a", num(1))])
		for code, statements in [
			(diagnostics.DUPLICATE_DECLARATION, [
				syntax.VariableDeclaration("x", num(1)),
				syntax.VariableDeclaration("x", num(2)),
			]),
			(diagnostics.ASSIGN_TO_LOCKED, [
				syntax.VariableDeclaration("x", num(1), locked=True),
				syntax.AssignmentExpression(ident("x"), num(2)),
			]),
			(diagnostics.UNRESOLVED_NAME, [ident("nope")]),
			(diagnostics.UNKNOWN_PROPERTY, [
				syntax.VariableDeclaration("o", obj),
				syntax.MemberExpression(ident("o"), ident("b")),
			]),
			(diagnostics.TYPE_MISMATCH, [syntax.BinaryExpression(num(1), "-", syntax.StringLiteral("a"))]),
			(diagnostics.UNKNOWN_OPERATOR, [syntax.BinaryExpression(num(1), "&&", num(2))]),
			(diagnostics.INVALID_ASSIGNMENT_TARGET, [syntax.AssignmentExpression(num(1), num(2))]),
			("AT_UNKNOWN:Property", [syntax.Property("a")]),
		]:
			with self.subTest(code):
				self.assertEqual([code], _codes_from(*statements))

	def test_codes_are_stable(self):
		self.assertEqual(
			["AT2001", "AT2002", "AT2003", "AT2004", "AT2005", "AT2006", "AT2007"],
			[
				diagnostics.DUPLICATE_DECLARATION, diagnostics.ASSIGN_TO_LOCKED,
				diagnostics.UNRESOLVED_NAME, diagnostics.UNKNOWN_PROPERTY,
				diagnostics.TYPE_MISMATCH, diagnostics.UNKNOWN_OPERATOR,
				diagnostics.INVALID_ASSIGNMENT_TARGET,
			],
		)

	def test_errors_pile_up_in_order(self):
		codes = _codes_from(ident("a", at(1, 1)), ident("b", at(2, 1)), syntax.BinaryExpression(num(1), "?", num(1)))
		self.assertEqual(["AT2003", "AT2003", "AT2006"], codes)

class DiagnosticTextTests(unittest.TestCase):

	def test_plain_text(self):
		issue = Diagnostic("UnresolvedName", "AT2003", "cannot resolve y", ident("y", at(4, 2)))
		self.assertEqual(
			"Runtime Error: cannot resolve y\nat => line:4, column:2, error code:AT2003",
			issue.as_text(),
		)

	def test_illustrated_when_the_source_is_known(self):
		source = "let x = 1;\nx + yy;\n"
		report = Report(source=source)
		Environment(report).get("yy", ident("yy", at(2, 5)))
		[issue] = report.issues
		text = issue.as_text(source.splitlines())
		self.assertTrue(text.startswith("Runtime Error: cannot resolve yy\n"))
		self.assertIn("x + yy;", text)

	def test_no_illustration_for_synthetic_nodes(self):
		issue = Diagnostic("UnresolvedName", "AT2003", "cannot resolve q", ident("q"))
		self.assertEqual(2, len(issue.as_text(["q;"]).splitlines()))

class ReportTests(unittest.TestCase):

	def test_complain_to_console(self):
		report = Report(source="zz;")
		report.undefined_name("zz", ident("zz", at(1, 1)))
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			report.complain_to_console()
		text = err.getvalue()
		self.assertIn("1 runtime issue:", text)
		self.assertIn("error code:AT2003", text)

	def test_healthy_report_is_silent(self):
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			Report().complain_to_console()
			Report().assert_no_issues("should not raise")
		self.assertEqual("", err.getvalue())

	def test_assert_no_issues(self):
		report = Silence()
		report.unknown_operator("^", num(1))
		with self.assertRaises(AssertionError):
			report.assert_no_issues("broken")
		report.complain_to_console.assert_called_once_with()

	def test_reset(self):
		report = Report()
		report.undefined_name("a", ident("a"))
		self.assertTrue(report.sick())
		report.reset()
		self.assertTrue(report.ok())
		self.assertEqual([], report.issues)

	def test_issues_is_a_copy(self):
		report = Report()
		report.undefined_name("a", ident("a"))
		report.issues.clear()
		self.assertEqual(1, len(report.issues))

	def test_non_phrase_site_is_refused(self):
		with self.assertRaises(AssertionError):
			Report().error("Whatever", "AT0000", "not a phrase", "message")

if __name__ == '__main__':
	unittest.main()
