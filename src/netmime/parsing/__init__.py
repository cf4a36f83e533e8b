"""Public API surface for netmime.parsing."""
from .parameters import parse_parameter_map, split_base_type, split_parameter_pairs
from .type_parser import is_token, is_valid_top_level_type, parse_mime_type_without_parameter

__all__ = [
    "is_token",
    "is_valid_top_level_type",
    "parse_mime_type_without_parameter",
    "parse_parameter_map",
    "split_base_type",
    "split_parameter_pairs",
]
