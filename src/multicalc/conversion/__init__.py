"""
Unit and numeral-base conversion.
The conversion tables are built once at import and never mutated.
"""
