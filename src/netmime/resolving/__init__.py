"""Public API surface for netmime.resolving."""
from .extension_resolver import ExtensionResolver, extensions_from_mappings, find_mime_type

__all__ = ["ExtensionResolver", "extensions_from_mappings", "find_mime_type"]
