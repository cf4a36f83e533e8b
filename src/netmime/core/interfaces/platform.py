from __future__ import annotations
from typing import Optional, Protocol, Set, runtime_checkable


@runtime_checkable
class PlatformRegistryProtocol(Protocol):
    """Host operating system mime database.

    Extensions are passed and returned without the leading dot.
    """

    def lookup_type_for_extension(self, extension: str) -> Optional[str]:
        """Return the registered type for `extension`, or None."""
        ...

    def lookup_extensions_for_type(self, mime_type: str) -> Set[str]:
        """Return every extension registered for the exact `mime_type`."""
        ...

    def lookup_preferred_extension_for_type(self, mime_type: str) -> Optional[str]:
        """Return the extension the platform prefers for `mime_type`, or None."""
        ...
