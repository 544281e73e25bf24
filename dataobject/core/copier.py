"""
Copying scalar property values between data objects.

Copying happens in two phases. Planning resolves a writable target property
for every source property and fails before anything is written. Execution
then writes the pairs in order; a failing converter or setter stops it and
leaves the target partially updated. No rollback is attempted, callers must
discard the target after a copy failure.
"""
import logging
from typing import Any, Iterable, Optional

from dataobject.core.introspection import ExcludePredicate, describe_properties, select_properties
from dataobject.core.mapping import MapEntry, find_map, validate_mappings
from dataobject.core.resolver import PropertyPair, ResolveMode, resolve_target
from dataobject.exceptions import ConversionError, MissingTargetPropertyError, PropertyAssignmentError

logger = logging.getLogger(__name__)


def plan_copy(
    source: Any,
    other: Any,
    mappings: Optional[Iterable[MapEntry]] = None,
    exclude: Optional[ExcludePredicate] = None,
) -> list[PropertyPair]:
    """
    Pair every comparable, non-excluded source property with a writable target property.

    Raises:
        MissingTargetPropertyError: for the first source property without a target
    """
    table = validate_mappings(mappings)
    target_properties = describe_properties(other)
    plan = []

    for prop in select_properties(source, exclude):
        pair = resolve_target(prop, target_properties, table, ResolveMode.COPY)
        if pair is None:
            mapping = find_map(table, prop.name)
            target_name = prop.name if mapping.is_empty else mapping.target_name
            logger.debug(f"Copy to {type(other).__name__} canceled, no writable '{target_name}'")
            raise MissingTargetPropertyError(prop.name, target_name)
        plan.append(pair)

    return plan


def _execute_pair(pair: PropertyPair, source: Any, other: Any) -> None:
    value = pair.source.get_value(source)

    if pair.is_mapped:
        try:
            value = pair.mapping.convert(value)
        except Exception as exc:
            logger.debug(f"Converter for '{pair.source.name}' -> '{pair.target.name}' failed: {exc}")
            raise ConversionError(pair.source.name, pair.target.name) from exc

    try:
        pair.target.set_value(other, value)
    except Exception as exc:
        logger.debug(f"Assignment to '{pair.target.name}' failed: {exc}")
        raise PropertyAssignmentError(pair.source.name, pair.target.name) from exc


def copy_to(
    source: Any,
    other: Any,
    mappings: Optional[Iterable[MapEntry]] = None,
    exclude: Optional[ExcludePredicate] = None,
) -> None:
    """
    Copy the comparable property values of `source` onto `other`.

    Args:
        source: Object to read from
        other: Object to write to
        mappings: Optional mapping table (source name -> target name, converter)
        exclude: Predicate over PropertyDescriptor; True skips the property

    Raises:
        ValueError: if `other` is None
        MissingTargetPropertyError: planning failed, `other` is untouched
        ConversionError: a converter raised, `other` must be discarded
        PropertyAssignmentError: a setter raised, `other` must be discarded
    """
    if other is None:
        raise ValueError("Argument 'other' must not be None in function 'copy_to'.")

    plan = plan_copy(source, other, mappings, exclude)
    logger.debug(
        f"Copying {len(plan)} properties from {type(source).__name__} to {type(other).__name__}"
    )

    for pair in plan:
        _execute_pair(pair, source, other)
