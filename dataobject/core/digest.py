"""
Change-detection digests over the scalar properties of a data object.

Hash a value before an operation and afterwards: equal digests mean none of
its comparable properties changed. The digest is built from a canonical
literal rendering of each value, so it is reproducible across processes and
platforms.
"""
import hashlib
import json
import math
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, Iterable, Optional
from uuid import UUID

from dataobject.config import settings
from dataobject.core.introspection import ExcludePredicate, select_properties
from dataobject.core.mapping import MapEntry, find_map, validate_mappings
from dataobject.exceptions import UnsupportedValueError


def _format_number(value: Any) -> str:
    """
    Render a real number by its value, not its type.

    Equal numbers give equal tokens: 1, 1.0 and Decimal("1.00") all render
    as "1", 1.5 and Decimal("1.50") both as "3/2".
    """
    if isinstance(value, float) and not math.isfinite(value):
        return repr(value)
    if isinstance(value, Decimal) and not value.is_finite():
        if value.is_nan():
            return "nan"
        return "inf" if value > 0 else "-inf"

    ratio = Fraction(value)
    if ratio.denominator == 1:
        return str(ratio.numerator)
    return f"{ratio.numerator}/{ratio.denominator}"


def format_value(value: Any) -> str:
    """
    Render a scalar value as its canonical hash string token.

    Strings are JSON-quoted so they never collide with the null token,
    booleans or numbers, and so a separator inside a string can't shift
    the following tokens. Non-ASCII characters, lone surrogates included,
    are escaped so the hash string always encodes.
    """
    if value is None:
        return settings.NULL_TOKEN
    if isinstance(value, Enum):
        return format_value(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, (int, float, Decimal, Fraction)):
        return _format_number(value)
    if isinstance(value, (complex, UUID, timedelta)):
        return str(value)
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return "0x" + value.hex()
    raise UnsupportedValueError(value)


def build_hash_string(values: Iterable[Any]) -> str:
    """Concatenate the canonical tokens of the values, each followed by the separator."""
    separator = settings.VALUE_SEPARATOR
    return "".join(format_value(value) + separator for value in values)


def compute_digest(hash_string: str) -> bytes:
    return hashlib.new(
        settings.DIGEST_ALGORITHM,
        hash_string.encode(settings.HASH_ENCODING),
    ).digest()


def logical_values(
    value: Any,
    mappings: Optional[Iterable[MapEntry]] = None,
    exclude: Optional[ExcludePredicate] = None,
) -> list:
    """
    Values of the comparable, non-excluded properties of a value, in order.

    A property with a mapping contributes its converted value.
    """
    table = validate_mappings(mappings)
    values = []

    for prop in select_properties(value, exclude):
        raw = prop.get_value(value)
        mapping = find_map(table, prop.name)
        values.append(raw if mapping.is_empty else mapping.convert(raw))

    return values


def create_hash(
    value: Any,
    exclude: Optional[ExcludePredicate] = None,
    mappings: Optional[Iterable[MapEntry]] = None,
) -> bytes:
    """
    Compute the digest over all readable scalar properties of a value.

    Args:
        value: Any data object
        exclude: Predicate over PropertyDescriptor; True skips the property
        mappings: Optional mapping table whose converters apply to the values

    Returns:
        The digest bytes (32 bytes with the default SHA-256)
    """
    return compute_digest(build_hash_string(logical_values(value, mappings, exclude)))


def create_hash_hex(
    value: Any,
    exclude: Optional[ExcludePredicate] = None,
    mappings: Optional[Iterable[MapEntry]] = None,
) -> str:
    return create_hash(value, exclude, mappings).hex()
