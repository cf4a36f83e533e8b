"""
adapters.platform – Platform registry implementations.

``MimetypesPlatformRegistry`` exposes the host mime database through
:class:`PlatformRegistryProtocol`. It wraps a private
:class:`mimetypes.MimeTypes` instance, which starts from Python's built-in
default table (so ``js`` resolves even without any OS file) and is
then extended from the OS mime files (``mimetypes.knownfiles``) and, on
Windows, the registry. OS entries override the built-in ones.

``NullPlatformRegistry`` knows nothing; it restricts resolution to the
hard-coded tables.
"""

from __future__ import annotations

import mimetypes
import os
import sys
from typing import Iterable, Optional, Set

from netmime.core.interfaces.logging import LoggerLikeProtocol
from netmime.core.interfaces.platform import PlatformRegistryProtocol
from netmime.logging.helpers import get_logger
from netmime.utils.ascii import ascii_lower


def _strip_dot(ext: str) -> str:
    return ext[1:] if ext.startswith('.') else ext


class MimetypesPlatformRegistry(PlatformRegistryProtocol):
    def __init__(
        self,
        *,
        files: Optional[Iterable[str]] = None,
        use_windows_registry: bool = True,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('platform')
        self._db = mimetypes.MimeTypes()
        for path in (mimetypes.knownfiles if files is None else files):
            if not os.path.isfile(path):
                continue
            try:
                self._db.read(path)
            except OSError as exc:
                self._log.warning('⚠  could not read mime database %s (%s)', path, exc)
        if use_windows_registry and sys.platform.startswith('win'):
            self._db.read_windows_registry()

    def lookup_type_for_extension(self, extension: str) -> Optional[str]:
        if not extension:
            return None
        key = f'.{extension}'
        for strict in (True, False):
            table = self._db.types_map[strict]
            found = table.get(key) or table.get(ascii_lower(key))
            if found:
                return found
        return None

    def lookup_extensions_for_type(self, mime_type: str) -> Set[str]:
        if not mime_type:
            return set()
        return {_strip_dot(ext) for ext in self._db.guess_all_extensions(mime_type, strict=False)}

    def lookup_preferred_extension_for_type(self, mime_type: str) -> Optional[str]:
        if not mime_type:
            return None
        ext = self._db.guess_extension(mime_type, strict=False)
        return _strip_dot(ext) if ext else None


class NullPlatformRegistry(PlatformRegistryProtocol):
    """Registry with no entries at all."""

    def lookup_type_for_extension(self, extension: str) -> Optional[str]:
        return None

    def lookup_extensions_for_type(self, mime_type: str) -> Set[str]:
        return set()

    def lookup_preferred_extension_for_type(self, mime_type: str) -> Optional[str]:
        return None
