from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging surface the resolver and platform adapters write to.

    Any object with these methods can be injected in place of a
    ``logging.Logger``; lookup traces pass structured data via ``extra``.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Source of the scoped loggers handed to the resolver and registries."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the logger for `name` (under the ``netmime`` namespace)."""
        ...
