"""
Resolution of source properties onto target properties.

An explicit mapping always wins over identity matching, even when the target
also has a property with the source property's name.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from dataobject.core.introspection import PropertyDescriptor
from dataobject.core.mapping import Map, find_map


class ResolveMode(str, Enum):
    """Constraints a target property has to satisfy."""
    COMPARE = "compare"  # readable, comparable scalar unless mapped
    COPY = "copy"        # readable and writable


@dataclass(frozen=True)
class PropertyPair:
    """A source property, its resolved target property and the mapping that applies."""
    source: PropertyDescriptor
    target: PropertyDescriptor
    mapping: Map

    @property
    def is_mapped(self) -> bool:
        return not self.mapping.is_empty


def _satisfies(target: PropertyDescriptor, mode: ResolveMode, mapped: bool) -> bool:
    if not target.readable:
        return False
    if mode == ResolveMode.COPY:
        return target.writable
    # Mapped pairs skip the type check, the converter bridges the types
    return mapped or target.comparable


def resolve_target(
    source: PropertyDescriptor,
    target_properties: Iterable[PropertyDescriptor],
    mappings: Iterable[Map],
    mode: ResolveMode,
) -> Optional[PropertyPair]:
    """
    Find the target property corresponding to a source property.

    Args:
        source: Property of the source value
        target_properties: All described properties of the target value
        mappings: Validated mapping table
        mode: COMPARE or COPY constraints

    Returns:
        The resolved PropertyPair, or None if no target property qualifies
    """
    mapping = find_map(mappings, source.name)
    mapped = not mapping.is_empty
    target_name = mapping.target_name if mapped else source.name

    for target in target_properties:
        if target.name == target_name and _satisfies(target, mode, mapped):
            return PropertyPair(source=source, target=target, mapping=mapping)

    return None
