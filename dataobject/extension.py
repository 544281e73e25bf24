"""
Method-style access to the engine.

Classes that inherit DataObjectMixin can call the operations on themselves:

    record.copy_to(view, mappings=[Map("Validate", "IsValid", convert=str)])
    if view.is_equal_to(other_view):
        ...
"""
from typing import Any, Iterable, Optional

from dataobject.core import comparison, copier, digest
from dataobject.core.introspection import ExcludePredicate
from dataobject.core.mapping import MapEntry


class DataObjectMixin:
    """Adds create_hash, is_equal_to and copy_to to a data object class."""

    __slots__ = ()

    def create_hash(
        self,
        exclude: Optional[ExcludePredicate] = None,
        mappings: Optional[Iterable[MapEntry]] = None,
    ) -> bytes:
        return digest.create_hash(self, exclude, mappings)

    def is_equal_to(
        self,
        other: Any,
        mappings: Optional[Iterable[MapEntry]] = None,
        exclude: Optional[ExcludePredicate] = None,
    ) -> bool:
        return comparison.is_equal_to(self, other, mappings, exclude)

    def copy_to(
        self,
        other: Any,
        mappings: Optional[Iterable[MapEntry]] = None,
        exclude: Optional[ExcludePredicate] = None,
    ) -> None:
        copier.copy_to(self, other, mappings, exclude)
