"""
The overall control for the run-time: give a parsed program
a fresh root scope and a place to complain, then evaluate it.
"""
from typing import Optional
from .. import syntax
from ..diagnostics import Report
from ..environment import Environment
from .evaluator import evaluate
from .values import RuntimeValue

def run_program(program:syntax.Program, report:Optional[Report]=None, *, verbose:int=0) -> RuntimeValue:
	"""
	Evaluate every statement of the program in one root scope and return the last value.
	A null result may mean the program failed somewhere; check the report to know.
	The verbosity only configures the default report. Bring a report, and it brings its own.
	"""
	assert isinstance(program, syntax.Program), type(program)
	assert report is None or not verbose, "give either a report or a verbosity, not both"
	if report is None: report = Report(verbose=verbose)
	root = Environment(report)
	return evaluate(program, root)
