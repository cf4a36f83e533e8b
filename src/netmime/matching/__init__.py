"""Public API surface for netmime.matching."""
from .pattern import matches_mime_type, matches_mime_type_parameters

__all__ = ["matches_mime_type", "matches_mime_type_parameters"]
