# src/netmime/utils/paths.py
"""
paths – File path helpers for netmime.

Provides:
  • extension_of_path(path) – text after the last dot of the file name
"""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Union


def extension_of_path(path: Union[str, "os.PathLike[str]"]) -> str:
    """Return the text after the last dot of the file name, or ''.

    Only the final component counts, so ``archive.tar.gz`` yields ``gz``.
    A dot-file is all extension (``.png`` yields ``png``); ``.``, ``..`` and
    names ending in a dot have none.
    """
    name = PurePath(path).name
    if name in ('.', '..'):
        return ''
    _, sep, ext = name.rpartition('.')
    return ext if sep else ''
