"""
netmime.data – Fixed extension/type tables compiled into the package.
"""
from .tables import (
    DEFAULT_TABLES,
    DEFAULT_TYPE_GROUP,
    PRIMARY_MAPPINGS,
    SECONDARY_MAPPINGS,
    STANDARD_TYPE_GROUPS,
)

__all__ = [
    "DEFAULT_TABLES",
    "DEFAULT_TYPE_GROUP",
    "PRIMARY_MAPPINGS",
    "SECONDARY_MAPPINGS",
    "STANDARD_TYPE_GROUPS",
]
