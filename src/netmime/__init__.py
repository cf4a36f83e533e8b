from __future__ import annotations

from typing import Optional, Set

from netmime.adapters.platform import MimetypesPlatformRegistry, NullPlatformRegistry
from netmime.constants import LEGAL_TOP_LEVEL_TYPES, MAX_EXTENSION_LENGTH
from netmime.core.interfaces import PlatformRegistryProtocol
from netmime.core.models import MimeMapping, MimeTables, ParsedMimeType, StandardTypeGroup
from netmime.data.tables import DEFAULT_TABLES
from netmime.errors import MimeError, MimeParseError, NotATokenError
from netmime.matching.pattern import matches_mime_type
from netmime.parsing.type_parser import is_valid_top_level_type, parse_mime_type_without_parameter
from netmime.resolving.extension_resolver import ExtensionResolver
from netmime.runtime.container import (
    ResolverConfig,
    build_resolver,
    get_default_resolver,
    reset_default_resolver,
    set_default_resolver,
)

__version__ = '1.0.0'


def resolve_extension_to_type(extension: str) -> Optional[str]:
    """Map *extension* (no leading dot) to a type using tables and platform."""
    return get_default_resolver().type_for_extension(extension)


def resolve_well_known_extension_to_type(extension: str) -> Optional[str]:
    """Map *extension* to a type using only the hard-coded tables."""
    return get_default_resolver().well_known_type_for_extension(extension)


def resolve_file_to_type(path: str) -> Optional[str]:
    return get_default_resolver().type_for_file(path)


def extensions_for_type(pattern: str) -> Set[str]:
    return get_default_resolver().extensions_for_type(pattern)


def preferred_extension_for_type(mime_type: str) -> Optional[str]:
    return get_default_resolver().preferred_extension_for_type(mime_type)


def matches_pattern(pattern: str, candidate: str) -> bool:
    return matches_mime_type(pattern, candidate)


def parse_type(type_string: str) -> ParsedMimeType:
    """Split ``type/subtype``; raises NotATokenError on malformed input."""
    return parse_mime_type_without_parameter(type_string)


__all__ = [
    'resolve_extension_to_type',
    'resolve_well_known_extension_to_type',
    'resolve_file_to_type',
    'extensions_for_type',
    'preferred_extension_for_type',
    'matches_pattern',
    'parse_type',
    'is_valid_top_level_type',
    'ExtensionResolver',
    'ResolverConfig',
    'build_resolver',
    'get_default_resolver',
    'set_default_resolver',
    'reset_default_resolver',
    'MimetypesPlatformRegistry',
    'NullPlatformRegistry',
    'PlatformRegistryProtocol',
    'MimeMapping',
    'MimeTables',
    'ParsedMimeType',
    'StandardTypeGroup',
    'DEFAULT_TABLES',
    'LEGAL_TOP_LEVEL_TYPES',
    'MAX_EXTENSION_LENGTH',
    'MimeError',
    'MimeParseError',
    'NotATokenError',
]
