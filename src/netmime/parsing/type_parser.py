from __future__ import annotations

"""
type_parser – ``type/subtype`` splitting and top-level type validation.

Provides:
  • is_token(str)                      – HTTP token grammar check
  • parse_mime_type_without_parameter  – ``type/subtype`` → ParsedMimeType
  • is_valid_top_level_type(str)       – IANA list plus ``x-`` experimental types
"""

from netmime.constants import (
    EXPERIMENTAL_TYPE_PREFIX,
    HTTP_SEPARATORS,
    LEGAL_TOP_LEVEL_TYPES,
)
from netmime.core.models import ParsedMimeType
from netmime.errors import NotATokenError
from netmime.utils.ascii import ascii_lower


def _is_token_char(ch: str) -> bool:
    code = ord(ch)
    if code >= 0x80 or code < 0x20 or code == 0x7f:
        return False
    return ch not in HTTP_SEPARATORS


def is_token(value: str) -> bool:
    """Return True if *value* is a non-empty RFC 2616 token."""
    return bool(value) and all(_is_token_char(ch) for ch in value)


def parse_mime_type_without_parameter(type_string: str) -> ParsedMimeType:
    """Split *type_string* into its top-level type and subtype.

    The input must be exactly ``token/token``; parameters are not accepted
    and case is preserved.

    Raises:
        NotATokenError: If the string does not have two token components.
    """
    components = (type_string or '').split('/')
    if len(components) != 2 or not all(is_token(c) for c in components):
        raise NotATokenError(type_string)
    return ParsedMimeType(components[0], components[1])


def is_valid_top_level_type(type_string: str) -> bool:
    lower_type = ascii_lower(type_string or '')
    if lower_type in LEGAL_TOP_LEVEL_TYPES:
        return True
    return len(lower_type) > 2 and lower_type.startswith(EXPERIMENTAL_TYPE_PREFIX)
