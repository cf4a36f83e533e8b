"""Importable registry references used by the runtime settings tests."""
from __future__ import annotations

from typing import Optional, Set


class StaticRegistry:
    def lookup_type_for_extension(self, extension: str) -> Optional[str]:
        return "application/x-static" if extension.lower() == "sta" else None

    def lookup_extensions_for_type(self, mime_type: str) -> Set[str]:
        return {"sta"} if mime_type == "application/x-static" else set()

    def lookup_preferred_extension_for_type(self, mime_type: str) -> Optional[str]:
        return "sta" if mime_type == "application/x-static" else None


STATIC_INSTANCE = StaticRegistry()

NOT_A_REGISTRY = 42


def broken_factory():
    raise RuntimeError("boom")
