from __future__ import annotations

"""MIME type pattern matching used by content negotiation.

Accepted pattern shapes:
    application/x-foo      exact, case-insensitive
    application/*          segment wildcard with a literal prefix
    application/*+xml      segment wildcard with prefix and suffix
    * or */*               anything

Every parameter named by the pattern must be present in the candidate.
RFC 2045 makes parameter keys case-insensitive while values may or may not
be; values are compared case-sensitively here, which can produce false
negatives for values such as charsets.

Malformed patterns never raise, they simply do not match.
"""

from netmime.constants import WILDCARD_PATTERNS
from netmime.parsing.parameters import parse_parameter_map, split_base_type
from netmime.utils.ascii import ascii_equals_ignore_case, ascii_lower


def matches_mime_type_parameters(pattern: str, mime_type: str) -> bool:
    """Return True if every parameter of *pattern* appears in *mime_type*."""
    _, pattern_block = split_base_type(pattern)
    if pattern_block is None:
        return True
    _, candidate_block = split_base_type(mime_type)
    if candidate_block is None:
        return False

    pattern_params = parse_parameter_map(pattern_block)
    candidate_params = parse_parameter_map(candidate_block)
    if len(pattern_params) > len(candidate_params):
        return False

    for key, value in pattern_params.items():
        if key not in candidate_params:
            return False
        if candidate_params[key] != value:
            return False
    return True


def _matches_base_type(base_pattern: str, base_type: str) -> bool:
    if base_pattern in WILDCARD_PATTERNS:
        return True

    star = base_pattern.find('*')
    if star == -1:
        return ascii_equals_ignore_case(base_pattern, base_type)

    # Keeps ``left`` and ``right`` from overlapping inside the candidate.
    if len(base_type) < len(base_pattern) - 1:
        return False

    left = ascii_lower(base_pattern[:star])
    right = ascii_lower(base_pattern[star + 1:])
    lowered = ascii_lower(base_type)
    if not lowered.startswith(left):
        return False
    if right and not lowered.endswith(right):
        return False
    return True


def matches_mime_type(pattern: str, mime_type: str) -> bool:
    """Return True if *mime_type* satisfies *pattern*.

    Args:
        pattern: Possibly wildcarded, possibly parameterized type pattern.
        mime_type: Concrete candidate type, optionally with parameters.

    Returns:
        True when both the base type and the parameters match.
    """
    if not pattern:
        return False
    candidate = mime_type or ''
    base_pattern, _ = split_base_type(pattern)
    base_type, _ = split_base_type(candidate)
    if not _matches_base_type(base_pattern, base_type):
        return False
    return matches_mime_type_parameters(pattern, candidate)
