# DataObject v1.0.0
"""
Core package for the data object engine.
Contains introspection, mapping resolution, digests, comparison and copying.
"""
from dataobject.core.introspection import (
    describe_properties,
    comparable_properties,
    select_properties,
    is_comparable_type,
    exclude_names,
    include_all,
    PropertyDescriptor,
    ExcludePredicate
)
from dataobject.core.mapping import (
    validate_mappings,
    find_map,
    Map,
    EMPTY_MAP
)
from dataobject.core.resolver import (
    resolve_target,
    PropertyPair,
    ResolveMode
)
from dataobject.core.digest import (
    create_hash,
    create_hash_hex,
    format_value,
    build_hash_string,
    compute_digest,
    logical_values
)
from dataobject.core.comparison import (
    compare_objects,
    is_equal_to,
    ComparisonResult
)
from dataobject.core.copier import (
    copy_to,
    plan_copy
)

__all__ = [
    "describe_properties",
    "comparable_properties",
    "select_properties",
    "is_comparable_type",
    "exclude_names",
    "include_all",
    "PropertyDescriptor",
    "ExcludePredicate",
    "validate_mappings",
    "find_map",
    "Map",
    "EMPTY_MAP",
    "resolve_target",
    "PropertyPair",
    "ResolveMode",
    "create_hash",
    "create_hash_hex",
    "format_value",
    "build_hash_string",
    "compute_digest",
    "logical_values",
    "compare_objects",
    "is_equal_to",
    "ComparisonResult",
    "copy_to",
    "plan_copy"
]
