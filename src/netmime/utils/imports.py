from __future__ import annotations

"""
Resolution of ``NETMIME_PLATFORM`` references.

A custom platform registry is named as "module.path:AttrName"; the attribute
may be a registry class, a zero-argument factory or a ready instance. Any
failure surfaces as ImportError so the container can log it and fall back to
the system registry.

Public API:
    - load_object_from_ref(ref): object
"""

import importlib
from typing import Any


def load_object_from_ref(ref: str) -> Any:
    """Import the module half of *ref* and return its named attribute.

    Raises:
        ImportError: If *ref* is not 'module.path:AttrName', the module fails
            to import, or the attribute is missing.
    """
    module_name, sep, attr = (ref or '').partition(':')
    if not (module_name and sep and attr):
        raise ImportError(f"Invalid platform reference '{ref}'. Expected 'module.path:AttrName'.")
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        raise ImportError(f"Cannot import '{module_name}' for platform reference '{ref}': {exc}") from exc
    if not hasattr(module, attr):
        raise ImportError(f"'{module_name}' defines no '{attr}' for platform reference '{ref}'")
    return getattr(module, attr)
