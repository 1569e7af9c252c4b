"""Equation solvers (linear systems, quadratics)."""
