from __future__ import annotations

"""
parameters – Isolation and parsing of the ``;key=value`` block of a type string.

Semantics:
    * The base type is everything before the first ``;``.
    * Pairs are split on ``;``, whitespace-trimmed and empty pairs skipped.
    * The key is the text before the first ``=``; the value is what follows
      any run of ``=``. A pair without ``=`` yields an empty key and value.
    * Keys are lower-cased in the resulting map, values keep their case.
      A repeated key keeps its last value.

Examples:
    split_base_type("text/plain; charset=utf-8") -> ("text/plain", " charset=utf-8")
    parse_parameter_map(" charset=utf-8;Foo=Bar") -> {"charset": "utf-8", "foo": "Bar"}
"""

from typing import Dict, List, Optional, Tuple

from netmime.utils.ascii import ascii_lower


def split_base_type(type_string: str) -> Tuple[str, Optional[str]]:
    """Return ``(base, parameter_block)``; the block is None when there is no ``;``."""
    base, sep, params = type_string.partition(';')
    return (base, params if sep else None)


def _split_key_value(pair: str) -> Tuple[str, str]:
    key, sep, remains = pair.partition('=')
    if not sep:
        return ('', '')
    return (key, remains.lstrip('='))


def split_parameter_pairs(block: str) -> List[Tuple[str, str]]:
    pairs: List[Tuple[str, str]] = []
    for raw in block.split(';'):
        item = raw.strip()
        if not item:
            continue
        pairs.append(_split_key_value(item))
    return pairs


def parse_parameter_map(block: str) -> Dict[str, str]:
    """Build the lower-cased key → value map for a parameter block."""
    return {ascii_lower(key): value for key, value in split_parameter_pairs(block)}
