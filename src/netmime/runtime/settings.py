from __future__ import annotations

"""Environment-driven settings for the default resolver.

Recognised variables:
    NETMIME_PLATFORM   'system' (default), 'none', or 'module.path:Attr'
                       naming a registry class, factory or instance.
    NETMIME_LOG_LEVEL  Optional level name; when set, the base logger is
                       configured with a stderr handler.
    NETMIME_JSON_LOGS  '1' selects the JSON formatter.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

PLATFORM_SYSTEM = 'system'
PLATFORM_NONE = 'none'


@dataclass(frozen=True)
class Settings:
    platform: str = PLATFORM_SYSTEM
    log_level: Optional[int] = None
    json_logs: bool = False


def _parse_level(raw: Optional[str]) -> Optional[int]:
    value = (raw or '').strip()
    if not value:
        return None
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level '{raw}'")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read `Settings` from *environ* (``os.environ`` by default).

    Raises:
        ValueError: If NETMIME_LOG_LEVEL names an unknown level.
    """
    env = os.environ if environ is None else environ
    platform = (env.get('NETMIME_PLATFORM') or PLATFORM_SYSTEM).strip()
    if platform.lower() in (PLATFORM_SYSTEM, PLATFORM_NONE):
        platform = platform.lower()
    return Settings(
        platform=platform,
        log_level=_parse_level(env.get('NETMIME_LOG_LEVEL')),
        json_logs=env.get('NETMIME_JSON_LOGS') == '1',
    )
