"""
Duck-type comparison of data objects.

Two objects are equal when the digest over the source's comparable
properties matches the digest over the corresponding properties of the
other object. Corresponding properties either share the source property's
name or are named by a mapping, whose converter is applied to the source
value so it can be compared to an already converted target value.

The objects don't need to share a type. Comparison is not symmetric when
the mapping table isn't.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from dataobject.core.digest import build_hash_string, compute_digest
from dataobject.core.introspection import ExcludePredicate, describe_properties, select_properties
from dataobject.core.mapping import MapEntry, validate_mappings
from dataobject.core.resolver import ResolveMode, resolve_target

logger = logging.getLogger(__name__)


@dataclass
class ComparisonResult:
    """Result of comparing two data objects."""
    is_identical: bool = False
    source_hash: str = ""
    other_hash: str = ""

    # Source property names that took part, in order
    compared: list[str] = field(default_factory=list)

    # Source property without a counterpart, which ended the comparison
    unresolved: Optional[str] = None

    @property
    def compared_count(self) -> int:
        return len(self.compared)

    def to_dict(self) -> dict:
        result = {
            "is_identical": self.is_identical,
            "compared_count": self.compared_count,
            "compared": self.compared,
            "source_hash": self.source_hash,
            "other_hash": self.other_hash,
        }
        if self.unresolved is not None:
            result["unresolved"] = self.unresolved
        return result

    def __bool__(self) -> bool:
        return self.is_identical


def compare_objects(
    source: Any,
    other: Any,
    mappings: Optional[Iterable[MapEntry]] = None,
    exclude: Optional[ExcludePredicate] = None,
) -> ComparisonResult:
    """
    Compare two data objects and report how the decision was made.

    A source property without a readable counterpart on `other` ends the
    comparison: the objects are reported as different, nothing is raised.

    Args:
        source: The object whose properties drive the comparison
        other: The object compared against
        mappings: Optional mapping table (source name -> target name, converter)
        exclude: Predicate over PropertyDescriptor; True skips the property

    Returns:
        ComparisonResult with both digests in hex
    """
    if other is None:
        logger.debug("Comparison against None, objects differ")
        return ComparisonResult(is_identical=False)

    table = validate_mappings(mappings)
    target_properties = describe_properties(other)

    source_values = []
    other_values = []
    compared = []

    for prop in select_properties(source, exclude):
        pair = resolve_target(prop, target_properties, table, ResolveMode.COMPARE)
        if pair is None:
            logger.debug(
                f"No readable counterpart for '{prop.name}' on {type(other).__name__}, objects differ"
            )
            return ComparisonResult(is_identical=False, compared=compared, unresolved=prop.name)

        raw = prop.get_value(source)
        source_values.append(pair.mapping.convert(raw) if pair.is_mapped else raw)
        other_values.append(pair.target.get_value(other))
        compared.append(prop.name)

    source_digest = compute_digest(build_hash_string(source_values))
    other_digest = compute_digest(build_hash_string(other_values))

    return ComparisonResult(
        is_identical=source_digest == other_digest,
        source_hash=source_digest.hex(),
        other_hash=other_digest.hex(),
        compared=compared,
    )


def is_equal_to(
    source: Any,
    other: Any,
    mappings: Optional[Iterable[MapEntry]] = None,
    exclude: Optional[ExcludePredicate] = None,
) -> bool:
    """True if `other` holds the same comparable values as `source`. See compare_objects."""
    return compare_objects(source, other, mappings, exclude).is_identical
