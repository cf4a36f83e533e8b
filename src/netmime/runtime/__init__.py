"""Public API surface for netmime.runtime."""
from .container import (
    ResolverConfig,
    build_resolver,
    config_from_settings,
    get_default_resolver,
    reset_default_resolver,
    set_default_resolver,
)
from .settings import Settings, load_settings

__all__ = [
    "ResolverConfig",
    "Settings",
    "build_resolver",
    "config_from_settings",
    "get_default_resolver",
    "load_settings",
    "reset_default_resolver",
    "set_default_resolver",
]
