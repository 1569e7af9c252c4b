"""
Numeric libraries: scientific functions and matrix algebra.

Note: These modules are pure Python/NumPy and hold no calculator state.
"""
