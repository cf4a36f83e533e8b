"""
ascii – ASCII-only case folding.

Type names, parameter keys and extensions compare case-insensitively over
ASCII letters only; other characters never fold, so look-alikes such as
U+212A KELVIN SIGN stay distinct from ``k``.
"""

import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(value: str) -> str:
    """Lower-case A-Z only."""
    return value.translate(_ASCII_LOWER)


def ascii_equals_ignore_case(a: str, b: str) -> bool:
    return len(a) == len(b) and ascii_lower(a) == ascii_lower(b)
