"""
Safe evaluation of single-variable expressions for the graphing screen.

Text is tokenized, parsed into an immutable AST and interpreted; nothing is
ever handed to Python's eval().
"""
from multicalc.expression.evaluator import GraphExpression, GraphPoint, evaluate, sample
from multicalc.expression.parser import parse

__all__ = ["GraphExpression", "GraphPoint", "evaluate", "parse", "sample"]
