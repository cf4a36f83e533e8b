"""
netmime.utils – Small shared helpers (ASCII case folding, path extensions, dynamic imports).
"""
from .ascii import ascii_equals_ignore_case, ascii_lower
from .imports import load_object_from_ref
from .paths import extension_of_path

__all__ = ["ascii_equals_ignore_case", "ascii_lower", "extension_of_path", "load_object_from_ref"]
