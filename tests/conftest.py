from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, Iterable, Optional, Set

import pytest

# Make the src/ layout importable without an editable install
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from netmime.runtime.container import reset_default_resolver  # noqa: E402


class FakePlatformRegistry:
    """In-memory platform registry that records every query."""

    def __init__(
        self,
        types: Optional[Dict[str, str]] = None,
        extensions: Optional[Dict[str, Iterable[str]]] = None,
        preferred: Optional[Dict[str, str]] = None,
    ) -> None:
        self.types = dict(types or {})
        self.extensions = {k: set(v) for k, v in (extensions or {}).items()}
        self.preferred = dict(preferred or {})
        self.calls: list[tuple[str, str]] = []

    def lookup_type_for_extension(self, extension: str) -> Optional[str]:
        self.calls.append(("type", extension))
        return self.types.get(extension.lower())

    def lookup_extensions_for_type(self, mime_type: str) -> Set[str]:
        self.calls.append(("extensions", mime_type))
        return set(self.extensions.get(mime_type, ()))

    def lookup_preferred_extension_for_type(self, mime_type: str) -> Optional[str]:
        self.calls.append(("preferred", mime_type))
        return self.preferred.get(mime_type)


class ExplodingPlatformRegistry:
    """Registry that fails the test as soon as it is consulted."""

    def lookup_type_for_extension(self, extension: str) -> Optional[str]:
        pytest.fail(f"platform registry queried for extension {extension!r}")

    def lookup_extensions_for_type(self, mime_type: str) -> Set[str]:
        pytest.fail(f"platform registry queried for type {mime_type!r}")

    def lookup_preferred_extension_for_type(self, mime_type: str) -> Optional[str]:
        pytest.fail(f"platform registry queried for type {mime_type!r}")


@pytest.fixture(autouse=True)
def _isolated_default_resolver(monkeypatch):
    monkeypatch.delenv("NETMIME_PLATFORM", raising=False)
    monkeypatch.delenv("NETMIME_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NETMIME_JSON_LOGS", raising=False)
    monkeypatch.delenv("NETMIME_TRACE", raising=False)
    reset_default_resolver()
    yield
    reset_default_resolver()


@pytest.fixture
def fake_platform() -> FakePlatformRegistry:
    return FakePlatformRegistry()


@pytest.fixture
def exploding_platform() -> ExplodingPlatformRegistry:
    return ExplodingPlatformRegistry()
