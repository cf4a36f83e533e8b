from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .platform import PlatformRegistryProtocol
from .resolver import ExtensionResolverProtocol

__all__ = [
    'ExtensionResolverProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'PlatformRegistryProtocol',
]
