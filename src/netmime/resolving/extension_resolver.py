from __future__ import annotations

"""
Extension ↔ type resolution over the hard-coded tables and the platform registry.

Forward lookups (extension → type) use a fixed precedence:
    1. primary table    – first match wins, never overridden
    2. platform         – only when platform types are allowed
    3. secondary table  – first match wins

Reverse lookups (type or ``type/*`` → extensions) union the platform answer
with every hard-coded mapping whose type starts with the requested prefix.
The result is a plain ``set``; callers must not rely on any ordering.
"""

from typing import Iterable, Optional, Sequence, Set

from netmime.constants import MAX_EXTENSION_LENGTH, WILDCARD_PATTERNS
from netmime.core.interfaces.logging import LoggerLikeProtocol
from netmime.core.interfaces.platform import PlatformRegistryProtocol
from netmime.core.interfaces.resolver import ExtensionResolverProtocol
from netmime.core.models import MimeMapping, MimeTables
from netmime.logging.helpers import get_logger, trace
from netmime.utils.ascii import ascii_lower
from netmime.utils.paths import extension_of_path


def find_mime_type(mappings: Sequence[MimeMapping], ext: str) -> Optional[str]:
    """Return the type of the first mapping listing *ext*, or None."""
    for mapping in mappings:
        if mapping.has_extension(ext):
            return mapping.mime_type
    return None


def extensions_from_mappings(mappings: Iterable[MimeMapping], leading_type: str) -> Set[str]:
    """Collect the extensions of every mapping whose type starts with *leading_type*."""
    prefix = ascii_lower(leading_type)
    found: Set[str] = set()
    for mapping in mappings:
        if ascii_lower(mapping.mime_type).startswith(prefix):
            found.update(mapping.extension_list)
    return found


class ExtensionResolver(ExtensionResolverProtocol):
    def __init__(
        self,
        *,
        tables: MimeTables,
        platform: PlatformRegistryProtocol,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._tables = tables
        self._platform = platform
        self._log = logger or get_logger('resolver')

    @property
    def tables(self) -> MimeTables:
        return self._tables

    @property
    def platform(self) -> PlatformRegistryProtocol:
        return self._platform

    def _resolve(self, ext: str, include_platform: bool) -> Optional[str]:
        if len(ext) > MAX_EXTENSION_LENGTH:
            self._log.debug('extension of %d chars exceeds the %d limit; not resolved',
                            len(ext), MAX_EXTENSION_LENGTH)
            return None

        found = find_mime_type(self._tables.primary, ext)
        if found:
            trace(self._log, 'primary table hit', ext=ext, mime=found)
            return found

        if include_platform:
            found = self._platform.lookup_type_for_extension(ext)
            if found:
                trace(self._log, 'platform hit', ext=ext, mime=found)
                return found

        found = find_mime_type(self._tables.secondary, ext)
        if found:
            trace(self._log, 'secondary table hit', ext=ext, mime=found)
        return found

    def type_for_extension(self, extension: str) -> Optional[str]:
        """Resolve *extension* (no leading dot) consulting every source."""
        return self._resolve(extension, include_platform=True)

    def well_known_type_for_extension(self, extension: str) -> Optional[str]:
        """Resolve *extension* from the hard-coded tables only.

        Use this where an OS-level override is undesirable, e.g. when the
        answer feeds a security decision.
        """
        return self._resolve(extension, include_platform=False)

    def type_for_file(self, path: str) -> Optional[str]:
        ext = extension_of_path(path)
        if not ext:
            return None
        return self._resolve(ext, include_platform=True)

    def extensions_for_type(self, mime_type_pattern: str) -> Set[str]:
        """Return every known extension for a type or a ``type/*`` wildcard.

        ``*`` and ``*/*`` are too broad to enumerate and yield an empty set.
        """
        if mime_type_pattern in WILDCARD_PATTERNS:
            return set()

        mime_type = ascii_lower(mime_type_pattern)
        unique: Set[str] = set()

        if mime_type.endswith('/*'):
            leading_type = mime_type[:-1]
            group = self._tables.group_for(leading_type)
            for member in group.member_types:
                unique.update(self._platform.lookup_extensions_for_type(member))
        else:
            leading_type = mime_type
            unique.update(self._platform.lookup_extensions_for_type(mime_type))

        # Some supported extensions (like ogg) are missing from OS registries.
        unique.update(extensions_from_mappings(self._tables.primary, leading_type))
        unique.update(extensions_from_mappings(self._tables.secondary, leading_type))
        trace(self._log, 'reverse lookup', pattern=mime_type_pattern, count=len(unique))
        return unique

    def preferred_extension_for_type(self, mime_type: str) -> Optional[str]:
        """Return the platform's preferred extension, else the first hard-coded one."""
        found = self._platform.lookup_preferred_extension_for_type(mime_type)
        if found:
            return found
        wanted = ascii_lower(mime_type or '')
        for mappings in (self._tables.primary, self._tables.secondary):
            for mapping in mappings:
                if mapping.mime_type == wanted:
                    return mapping.extension_list[0]
        return None
