from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

from typing import FrozenSet

# Upper bound on extension length accepted by the resolver.
MAX_EXTENSION_LENGTH: int = 65536

# See http://www.iana.org/assignments/media-types/media-types.xhtml
LEGAL_TOP_LEVEL_TYPES: tuple[str, ...] = (
    'application',
    'audio',
    'example',
    'image',
    'message',
    'model',
    'multipart',
    'text',
    'video',
)

EXPERIMENTAL_TYPE_PREFIX: str = 'x-'

# RFC 2616 separators; none of them may appear inside a token.
HTTP_SEPARATORS: FrozenSet[str] = frozenset('()<>@,;:\\"/[]?={} \t')

WILDCARD_PATTERNS: tuple[str, ...] = ('*', '*/*')
