"""Type scanner protocol and general-purpose scan strategies."""

from __future__ import annotations

import inspect
from types import ModuleType
from typing import Callable, Iterable, Iterator, Protocol, Sequence, runtime_checkable

from typescan.errors import InvalidArgumentError

__all__ = [
    "AttributeTypeScanner",
    "PredicateTypeScanner",
    "SubclassTypeScanner",
    "TypeScanner",
    "iter_module_types",
]


@runtime_checkable
class TypeScanner(Protocol):
    """A scan strategy: turns a sequence of modules into candidate types.

    Implementations must accept zero or more modules and must not depend on
    their order.
    """

    def scan(self, modules: Sequence[ModuleType]) -> Iterable[type]: ...


def iter_module_types(module: ModuleType) -> Iterator[type]:
    """Yield classes defined in ``module`` itself, in definition order.

    Imported classes and aliases of an already yielded class are skipped.
    """
    seen: set[int] = set()
    for value in list(vars(module).values()):
        if not inspect.isclass(value):
            continue
        if value.__module__ != module.__name__:
            continue
        if id(value) in seen:
            continue
        seen.add(id(value))
        yield value


class PredicateTypeScanner:
    """Yields every class defined in the scanned modules that satisfies ``predicate``."""

    def __init__(self, predicate: Callable[[type], bool]) -> None:
        self._predicate = predicate

    def scan(self, modules: Sequence[ModuleType]) -> Iterator[type]:
        for module in modules:
            for cls in iter_module_types(module):
                if self._predicate(cls):
                    yield cls


class SubclassTypeScanner(PredicateTypeScanner):
    """Yields strict subclasses of ``base``.

    Abstract classes are skipped unless ``include_abstract`` is set.
    """

    def __init__(self, base: type, include_abstract: bool = False) -> None:
        self.base = base
        self.include_abstract = include_abstract
        super().__init__(self._matches)

    def _matches(self, cls: type) -> bool:
        if cls is self.base or not issubclass(cls, self.base):
            return False
        if inspect.isabstract(cls) and not self.include_abstract:
            return False
        return True


class AttributeTypeScanner(PredicateTypeScanner):
    """Duck-typed scanner: yields classes that define every named attribute."""

    def __init__(self, *attribute_names: str) -> None:
        if not attribute_names:
            raise InvalidArgumentError("attribute_names", message="At least one attribute name is required")
        self.attribute_names = attribute_names
        super().__init__(self._matches)

    def _matches(self, cls: type) -> bool:
        return all(getattr(cls, name, None) is not None for name in self.attribute_names)
