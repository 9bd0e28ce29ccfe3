"""Detection of the module that called into typescan."""

from __future__ import annotations

import inspect
import sys
from types import FrameType, ModuleType

__all__ = ["OWN_PACKAGE", "find_calling_module"]

OWN_PACKAGE = __name__.split(".")[0]


def _belongs_to(module_name: str, package: str) -> bool:
    return module_name == package or module_name.startswith(package + ".")


def _frame_module(frame: FrameType) -> ModuleType | None:
    name = frame.f_globals.get("__name__")
    if not isinstance(name, str):
        return None
    return sys.modules.get(name)


def find_calling_module(own_package: str = OWN_PACKAGE) -> ModuleType | None:
    """Return the module of the innermost frame outside ``own_package``.

    Walks frame objects only (no source lookups, unlike ``inspect.stack()``).
    Frames whose module is not in ``sys.modules`` are skipped. Returns None
    when every frame belongs to ``own_package``.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None:
            module = _frame_module(frame)
            if module is not None and not _belongs_to(module.__name__, own_package):
                return module
            frame = frame.f_back
        return None
    finally:
        del frame
