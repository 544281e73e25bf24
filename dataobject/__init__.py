# DataObject v1.0.0
"""
DataObject - duck-typed hashing, comparison and copying of flat data objects.

Works across unrelated types (SQLAlchemy models, pydantic models,
dataclasses, plain classes) by matching scalar properties by name or through
an explicit mapping table.
"""
from dataobject.config import settings
from dataobject.core import (
    create_hash,
    create_hash_hex,
    is_equal_to,
    compare_objects,
    copy_to,
    plan_copy,
    describe_properties,
    comparable_properties,
    exclude_names,
    validate_mappings,
    ComparisonResult,
    PropertyDescriptor,
    PropertyPair,
    Map,
    EMPTY_MAP
)
from dataobject.exceptions import (
    DataObjectError,
    MissingTargetPropertyError,
    ConversionError,
    PropertyAssignmentError,
    UnsupportedValueError
)
from dataobject.extension import DataObjectMixin

__version__ = settings.APP_VERSION

__all__ = [
    "settings",
    "create_hash",
    "create_hash_hex",
    "is_equal_to",
    "compare_objects",
    "copy_to",
    "plan_copy",
    "describe_properties",
    "comparable_properties",
    "exclude_names",
    "validate_mappings",
    "ComparisonResult",
    "PropertyDescriptor",
    "PropertyPair",
    "Map",
    "EMPTY_MAP",
    "DataObjectError",
    "MissingTargetPropertyError",
    "ConversionError",
    "PropertyAssignmentError",
    "UnsupportedValueError",
    "DataObjectMixin"
]
