"""typescan - Pluggable type discovery over Python modules."""

from __future__ import annotations

# Core
from typescan.scanning import (
    AttributeTypeScanner,
    PredicateTypeScanner,
    ScannerRegistry,
    SubclassTypeScanner,
    TypeScanner,
)

# Config
from typescan.config import Config, ScanSettings

# Errors
from typescan.errors import (
    ConfigError,
    ConfigNotFoundError,
    DirectoryNotFoundError,
    ErrorCodes,
    InvalidArgumentError,
    ModuleLoadError,
    TypeScanError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ScannerRegistry",
    "TypeScanner",
    # Scanners
    "AttributeTypeScanner",
    "PredicateTypeScanner",
    "SubclassTypeScanner",
    # Config
    "Config",
    "ScanSettings",
    # Errors
    "ErrorCodes",
    "TypeScanError",
    "InvalidArgumentError",
    "ModuleLoadError",
    "DirectoryNotFoundError",
    "ConfigError",
    "ConfigNotFoundError",
]
