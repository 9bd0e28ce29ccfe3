"""Type discovery: modules, type scanners and inclusion filters.

Usage::

    from typescan.scanning import ScannerRegistry, SubclassTypeScanner

    registry = ScannerRegistry()
    registry.add_calling_module()
    registry.add_scanner(SubclassTypeScanner(Plugin))
    plugins = registry.scan()
"""

from __future__ import annotations

from typescan.scanning.caller import find_calling_module
from typescan.scanning.filters import TypeFilter, accepts, namespace_filter, namespace_of
from typescan.scanning.loader import ModuleLoader, iter_module_files, load_module_from_file
from typescan.scanning.registry import ScannerRegistry, application_base_dir
from typescan.scanning.scanners import (
    AttributeTypeScanner,
    PredicateTypeScanner,
    SubclassTypeScanner,
    TypeScanner,
    iter_module_types,
)

__all__ = [
    "AttributeTypeScanner",
    "ModuleLoader",
    "PredicateTypeScanner",
    "ScannerRegistry",
    "SubclassTypeScanner",
    "TypeFilter",
    "TypeScanner",
    "accepts",
    "application_base_dir",
    "find_calling_module",
    "iter_module_files",
    "iter_module_types",
    "load_module_from_file",
    "namespace_filter",
    "namespace_of",
]
