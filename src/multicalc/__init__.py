"""
multicalc
=========
Calculation engine for a multi-mode calculator.

The UI feeds input events into a CalculatorEngine and renders the
resulting CalculatorState; the matrix, solver, conversion and expression
libraries are called directly by the screens that need them.
"""
