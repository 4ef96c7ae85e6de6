"""
Ion: the run-time core of a small scripting language.
Scopes, tagged values, and a tree-walking evaluator.
"""
