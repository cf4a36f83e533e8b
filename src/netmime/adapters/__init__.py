"""
netmime.adapters – Adapters that bridge host facilities to Protocols.

They are the explicit seam between the pure resolution logic and
side-effectful OS data, so tests can swap them for fakes.

Modules
-------
platform.py → MimetypesPlatformRegistry, NullPlatformRegistry
"""

from .platform import MimetypesPlatformRegistry, NullPlatformRegistry

__all__ = [
    "MimetypesPlatformRegistry",
    "NullPlatformRegistry",
]
