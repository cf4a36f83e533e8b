from __future__ import annotations
from typing import Optional, Protocol, Set, runtime_checkable


@runtime_checkable
class ExtensionResolverProtocol(Protocol):
    def type_for_extension(self, extension: str) -> Optional[str]:
        ...

    def well_known_type_for_extension(self, extension: str) -> Optional[str]:
        ...

    def type_for_file(self, path: str) -> Optional[str]:
        ...

    def extensions_for_type(self, mime_type_pattern: str) -> Set[str]:
        ...

    def preferred_extension_for_type(self, mime_type: str) -> Optional[str]:
        ...
