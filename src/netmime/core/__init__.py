from __future__ import annotations

"""Public surface for netmime.core.

Stable import location for the Protocols and data shapes shared by the
parser, matcher, resolver and adapters:

    from netmime.core import PlatformRegistryProtocol, MimeMapping, ...
"""

from netmime.core.interfaces import (
    ExtensionResolverProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    PlatformRegistryProtocol,
)
from netmime.core.models import (
    MimeMapping,
    MimeTables,
    ParsedMimeType,
    StandardTypeGroup,
)

__all__ = [
    # Protocols
    "ExtensionResolverProtocol",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "PlatformRegistryProtocol",
    # Models
    "MimeMapping",
    "MimeTables",
    "ParsedMimeType",
    "StandardTypeGroup",
]
