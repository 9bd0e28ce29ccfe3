"""Scanner registry: collects modules, scanners and filters, then runs the scan."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING, Callable, Iterable

from typescan.config import ScanSettings
from typescan.errors import InvalidArgumentError
from typescan.scanning.caller import find_calling_module
from typescan.scanning.filters import TypeFilter, accepts, namespace_filter
from typescan.scanning.loader import ModuleLoader, iter_module_files, load_module_from_file
from typescan.scanning.scanners import TypeScanner

if TYPE_CHECKING:
    from typescan.config import Config

logger = logging.getLogger(__name__)

__all__ = ["ScannerRegistry", "application_base_dir"]


def application_base_dir() -> Path:
    """Directory of the running ``__main__`` script, or the cwd when there is none."""
    main = sys.modules.get("__main__")
    main_file = getattr(main, "__file__", None)
    if main_file:
        return Path(main_file).resolve().parent
    return Path.cwd()


class ScannerRegistry:
    """Collects modules, type scanners and inclusion filters, and runs the scan.

    Configuration is append-only and may continue after ``scan()``; every call
    to ``scan()`` runs the scanners again with no caching.

    Filters are OR-ed: with no filters every candidate is kept, otherwise a
    candidate is kept when at least one filter accepts it. Adding a filter to
    an empty set narrows the result; adding another one broadens it again.

    Not thread-safe. Use one registry per thread or serialize access.
    """

    def __init__(self, config: Config | None = None, loader: ModuleLoader | None = None) -> None:
        """Initialize the registry.

        Args:
            config: Optional Config; the ``scanning`` section supplies
                ``base_dir`` and ``extensions`` for directory scans.
            loader: Callable turning a file path into a module. Defaults to
                :func:`load_module_from_file`.

        Raises:
            ConfigError: If the ``scanning`` section is invalid.
        """
        self._settings = ScanSettings.from_config(config)
        self._loader: ModuleLoader = loader or load_module_from_file
        self._modules: list[ModuleType] = []
        self._scanners: list[TypeScanner] = []
        self._filters: list[TypeFilter] = []

    @property
    def settings(self) -> ScanSettings:
        return self._settings

    @property
    def modules(self) -> list[ModuleType]:
        """Registered modules in insertion order (snapshot)."""
        return list(self._modules)

    @property
    def scanners(self) -> list[TypeScanner]:
        return list(self._scanners)

    @property
    def filters(self) -> list[TypeFilter]:
        return list(self._filters)

    # ----- Modules -----

    def add_module(self, module: ModuleType) -> None:
        """Add one module to scan.

        Raises:
            InvalidArgumentError: If module is None.
        """
        if module is None:
            raise InvalidArgumentError("module")
        self._modules.append(module)
        logger.debug("Added module '%s'", getattr(module, "__name__", module))

    def add_modules(self, modules: Iterable[ModuleType]) -> None:
        """Add several modules. Nothing is added if any entry is None.

        Raises:
            InvalidArgumentError: If modules is None or contains None.
        """
        if modules is None:
            raise InvalidArgumentError("modules")
        to_add = list(modules)
        if any(m is None for m in to_add):
            raise InvalidArgumentError("modules", message="Modules must not contain None values")
        for module in to_add:
            self.add_module(module)

    def add_calling_module(self) -> None:
        """Add the module of the code that called this method.

        Silently does nothing when no frame outside typescan can be found.
        """
        module = find_calling_module()
        if module is None:
            logger.debug("No calling module found outside typescan")
            return
        self.add_module(module)

    def add_modules_from_directory(
        self,
        path: str | Path | None = None,
        module_filter: Callable[[ModuleType], bool] | None = None,
    ) -> None:
        """Load and add every module file directly inside a directory.

        Files are matched on the configured extensions, case-insensitively.
        Loader errors propagate; modules added before the failure stay added.

        Args:
            path: Directory to scan. Defaults to ``settings.base_dir``, then to
                the application base directory.
            module_filter: Predicate over loaded modules; rejected modules are
                not added. Defaults to accepting all.

        Raises:
            DirectoryNotFoundError: If the directory does not exist.
            ModuleLoadError: If the default loader cannot import a file.
        """
        if path is not None:
            directory = Path(path)
        elif self._settings.base_dir is not None:
            directory = self._settings.base_dir
        else:
            directory = application_base_dir()

        for file_path in iter_module_files(directory, self._settings.extensions):
            module = self._loader(file_path)
            if module_filter is not None and not module_filter(module):
                logger.debug("Module from %s rejected by filter", file_path)
                continue
            self.add_module(module)

    # ----- Scanners -----

    def add_scanner(self, scanner: TypeScanner) -> None:
        """Add a scan strategy."""
        self._scanners.append(scanner)

    def add_scanner_type(self, scanner_cls: type[TypeScanner]) -> None:
        """Instantiate ``scanner_cls`` with no arguments and add it."""
        self.add_scanner(scanner_cls())

    # ----- Filters -----

    def add_filter(self, predicate: TypeFilter) -> None:
        """Add an inclusion filter. Filters are OR-ed together."""
        self._filters.append(predicate)

    def add_namespace_filter(self, anchor_type: type) -> None:
        """Include types whose module path starts with ``anchor_type``'s module path."""
        self.add_filter(namespace_filter(anchor_type))

    # ----- Scan -----

    def scan(self) -> list[type]:
        """Run every scanner over every module and return the accepted types.

        Results follow scanner registration order, then each scanner's yield
        order. Duplicates are kept.
        """
        modules = list(self._modules)
        results: list[type] = []
        for scanner in self._scanners:
            before = len(results)
            for cls in scanner.scan(modules):
                if accepts(self._filters, cls):
                    results.append(cls)
            logger.debug(
                "Scanner %s accepted %d type(s) from %d module(s)",
                type(scanner).__name__,
                len(results) - before,
                len(modules),
            )
        return results
