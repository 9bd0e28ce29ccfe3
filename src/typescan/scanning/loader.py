"""Module loading and file listing for directory scans."""

from __future__ import annotations

import hashlib
import importlib.machinery
import importlib.util
import logging
import os
import sys
from pathlib import Path
from types import ModuleType
from typing import Callable, Iterable, Iterator

from typescan.errors import DirectoryNotFoundError, ModuleLoadError

logger = logging.getLogger(__name__)

__all__ = ["ModuleLoader", "iter_module_files", "load_module_from_file"]

ModuleLoader = Callable[[Path], ModuleType]

_LOADER_CLASSES: dict[str, type[importlib.machinery.FileLoader]] = {
    ".py": importlib.machinery.SourceFileLoader,
    ".pyc": importlib.machinery.SourcelessFileLoader,
}


def iter_module_files(directory: Path, extensions: Iterable[str]) -> Iterator[Path]:
    """Yield files directly inside ``directory`` whose suffix matches ``extensions``.

    Suffixes are compared case-insensitively. Subdirectories are not entered.
    Files are yielded sorted by name.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise DirectoryNotFoundError(directory=str(directory))

    wanted = {ext.lower() for ext in extensions}
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda e: e.name)

    for entry in entries:
        if not entry.is_file():
            continue
        suffix = os.path.splitext(entry.name)[1].lower()
        if suffix not in wanted:
            logger.debug("Skipping %s: suffix '%s' not scanned", entry.path, suffix)
            continue
        yield Path(entry.path)


def _module_name_for(file_path: Path) -> str:
    digest = hashlib.sha1(str(file_path).encode("utf-8")).hexdigest()[:8]
    return f"typescan_ext_{file_path.stem}_{digest}"


def load_module_from_file(file_path: Path) -> ModuleType:
    """Import a Python source or bytecode file and return the module object.

    The module is registered in ``sys.modules`` under a name derived from the
    file path so that classes it defines resolve back to it.

    Raises:
        ModuleLoadError: If no loader handles the file or its code fails to run.
    """
    file_path = Path(file_path).resolve()
    module_name = _module_name_for(file_path)

    loader_cls = _LOADER_CLASSES.get(file_path.suffix.lower())
    if loader_cls is not None:
        loader = loader_cls(module_name, str(file_path))
        spec = importlib.util.spec_from_file_location(module_name, str(file_path), loader=loader)
    else:
        spec = importlib.util.spec_from_file_location(module_name, str(file_path))
    if spec is None or spec.loader is None:
        raise ModuleLoadError(
            file_path=str(file_path),
            reason=f"Cannot create import spec for {file_path}",
        )

    mod = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = mod
    try:
        spec.loader.exec_module(mod)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        raise ModuleLoadError(file_path=str(file_path), reason=f"Failed to import module: {exc}") from exc

    logger.debug("Loaded %s as module '%s'", file_path, module_name)
    return mod
