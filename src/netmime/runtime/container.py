from __future__ import annotations

"""
Composition of the process-wide resolver.

`get_default_resolver` builds the resolver at most once per process using a
double-checked lock: the lock is only contended until the instance exists,
after which every call is a plain attribute read. The instance itself is
read-only, so it is shared freely between threads.
"""

import threading
from dataclasses import dataclass, field
from typing import Optional

from netmime.adapters.platform import MimetypesPlatformRegistry, NullPlatformRegistry
from netmime.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from netmime.core.interfaces.platform import PlatformRegistryProtocol
from netmime.core.models import MimeTables
from netmime.data.tables import DEFAULT_TABLES
from netmime.logging.factory import DefaultLoggerFactory, PassiveLoggerFactory
from netmime.resolving.extension_resolver import ExtensionResolver
from netmime.runtime.settings import PLATFORM_NONE, PLATFORM_SYSTEM, Settings, load_settings
from netmime.utils.imports import load_object_from_ref


@dataclass(frozen=True)
class ResolverConfig:
    """Immutable configuration blob used to build an ExtensionResolver."""
    platform: PlatformRegistryProtocol
    logger: LoggerLikeProtocol
    tables: MimeTables = field(default=DEFAULT_TABLES)


def build_resolver(cfg: ResolverConfig) -> ExtensionResolver:
    return ExtensionResolver(tables=cfg.tables, platform=cfg.platform, logger=cfg.logger)


def logger_factory_for(settings: Settings) -> LoggerFactoryProtocol:
    if settings.log_level is None:
        return PassiveLoggerFactory()
    return DefaultLoggerFactory(json_logs=settings.json_logs, level=settings.log_level)


def platform_from_settings(settings: Settings, logger: LoggerLikeProtocol) -> PlatformRegistryProtocol:
    """Instantiate the platform registry named by *settings*.

    A custom reference that cannot be loaded or instantiated falls back to the
    system registry with a warning.
    """
    if settings.platform == PLATFORM_NONE:
        return NullPlatformRegistry()
    if settings.platform == PLATFORM_SYSTEM:
        return MimetypesPlatformRegistry(logger=logger)
    try:
        target = load_object_from_ref(settings.platform)
        # A class/factory is called; an instance is used as-is.
        registry = target() if callable(target) else target
    except Exception as exc:
        logger.warning(
            '⚠  failed to load platform registry %r: %s; using system registry',
            settings.platform,
            exc,
        )
        return MimetypesPlatformRegistry(logger=logger)
    if not isinstance(registry, PlatformRegistryProtocol):
        logger.warning(
            '⚠  %r does not provide a platform registry; using system registry',
            settings.platform,
        )
        return MimetypesPlatformRegistry(logger=logger)
    return registry


def config_from_settings(settings: Settings) -> ResolverConfig:
    factory = logger_factory_for(settings)
    logger = factory.get_logger('resolver')
    platform = platform_from_settings(settings, factory.get_logger('platform'))
    return ResolverConfig(platform=platform, logger=logger)


_DEFAULT_RESOLVER: Optional[ExtensionResolver] = None
_INIT_LOCK = threading.Lock()


def get_default_resolver() -> ExtensionResolver:
    """Return the process-wide resolver, building it from the environment once."""
    global _DEFAULT_RESOLVER
    resolver = _DEFAULT_RESOLVER
    if resolver is not None:
        return resolver
    with _INIT_LOCK:
        if _DEFAULT_RESOLVER is None:
            _DEFAULT_RESOLVER = build_resolver(config_from_settings(load_settings()))
        return _DEFAULT_RESOLVER


def set_default_resolver(resolver: Optional[ExtensionResolver]) -> None:
    """Install *resolver* as the process-wide instance (None resets it)."""
    global _DEFAULT_RESOLVER
    with _INIT_LOCK:
        _DEFAULT_RESOLVER = resolver


def reset_default_resolver() -> None:
    """Drop the process-wide resolver -- intended for test isolation."""
    set_default_resolver(None)
