"""
Property introspection for flat data objects.

Builds the ordered list of properties a value exposes, whatever kind of
object it is:
- SQLAlchemy mapped instances (column attributes)
- pydantic models (model fields and computed fields)
- dataclasses, plain classes and slotted classes (annotations, properties,
  slots and instance attributes)

Only depth-1 scalar properties are "comparable"; nested objects and
collections are described but never compared, hashed or copied.
"""
import dataclasses
import inspect
import logging
import types
import typing
from dataclasses import dataclass
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, Callable, Iterable, Optional
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import InstanceState

logger = logging.getLogger(__name__)

# datetime is a date subclass, IntEnum/StrEnum are Enum subclasses
SCALAR_TYPES = (
    bool, int, float, complex, str, bytes,
    Decimal, Fraction,
    date, time, timedelta,
    UUID, Enum,
    type(None),
)

ExcludePredicate = Callable[["PropertyDescriptor"], bool]


def is_comparable_type(declared_type: Any) -> bool:
    """
    Tell whether a declared type is a comparable scalar.

    Optional/Union types are comparable when every non-None member is,
    Annotated and NewType unwrap to their underlying type, Literal is
    comparable when every literal is a scalar value.
    """
    if declared_type is None:
        return False

    supertype = getattr(declared_type, "__supertype__", None)
    if supertype is not None:
        return is_comparable_type(supertype)

    origin = typing.get_origin(declared_type)
    args = typing.get_args(declared_type)

    if origin is typing.Annotated:
        return is_comparable_type(args[0])
    if origin is typing.Union or origin is types.UnionType:
        members = [arg for arg in args if arg is not type(None)]
        return bool(members) and all(is_comparable_type(arg) for arg in members)
    if origin is typing.Literal:
        return all(isinstance(arg, SCALAR_TYPES) for arg in args)
    if origin is not None:
        # list[int], dict[str, int], ClassVar[...] and friends
        return False

    return isinstance(declared_type, type) and issubclass(declared_type, SCALAR_TYPES)


@dataclass(frozen=True)
class PropertyDescriptor:
    """A named property of a data object, valid for a single engine call."""
    name: str
    declared_type: Any
    owner: type
    readable: bool = True
    writable: bool = False

    @property
    def comparable(self) -> bool:
        return is_comparable_type(self.declared_type)

    def get_value(self, obj: Any) -> Any:
        return getattr(obj, self.name)

    def set_value(self, obj: Any, value: Any) -> None:
        setattr(obj, self.name, value)


# ============================================================
# HELPERS
# ============================================================

def _is_private(name: str) -> bool:
    return name.startswith("_")


def _type_hints(obj: Any) -> dict:
    """Resolved annotations of a class or function, empty when forward references don't resolve."""
    try:
        return typing.get_type_hints(obj, include_extras=True)
    except (NameError, TypeError, AttributeError):
        return {}


def _own_annotations(klass: type) -> dict:
    try:
        return inspect.get_annotations(klass)
    except NameError:
        return dict(klass.__dict__.get("__annotations__", {}))


def _is_pseudo_field(declared_type: Any) -> bool:
    if typing.get_origin(declared_type) is typing.ClassVar or declared_type is typing.ClassVar:
        return True
    return isinstance(declared_type, dataclasses.InitVar) or declared_type is dataclasses.InitVar


def _slot_names(klass: type) -> list[str]:
    slots = klass.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [name for name in slots if name not in ("__dict__", "__weakref__")]


def _property_descriptor(value: Any, owner: type, name: str, prop: property) -> PropertyDescriptor:
    readable = prop.fget is not None
    declared = _type_hints(prop.fget).get("return") if readable else None

    if readable and declared is None:
        # No return annotation: fall back to the type of the current value
        try:
            declared = type(getattr(value, name))
        except Exception as exc:
            logger.debug(f"Property '{name}' of {owner.__name__} is unreadable: {exc!r}")
            readable = False

    return PropertyDescriptor(
        name=name,
        declared_type=declared,
        owner=owner,
        readable=readable,
        writable=prop.fset is not None,
    )


# ============================================================
# DISCOVERY PER VALUE KIND
# ============================================================

def _describe_class_properties(
    value: Any,
    seen: set,
    skip_classes: Iterable[type] = (),
) -> list[PropertyDescriptor]:
    """Collect `property` objects declared on the value's classes, base classes first."""
    cls = type(value)
    skip = set(skip_classes) | {object}
    found = []

    for klass in reversed(cls.__mro__):
        if klass in skip:
            continue
        for name, member in klass.__dict__.items():
            if _is_private(name) or name in seen or not isinstance(member, property):
                continue
            seen.add(name)
            found.append(_property_descriptor(value, cls, name, member))

    return found


def _describe_mapped(value: Any, state: InstanceState, seen: set) -> list[PropertyDescriptor]:
    """Column attributes of a SQLAlchemy mapped instance, in mapper order."""
    found = []

    for column_property in state.mapper.column_attrs:
        name = column_property.key
        if _is_private(name) or name in seen:
            continue

        try:
            declared = column_property.columns[0].type.python_type
        except NotImplementedError:
            declared = None

        seen.add(name)
        found.append(PropertyDescriptor(
            name=name,
            declared_type=declared,
            owner=state.class_,
            readable=True,
            writable=True,
        ))

    return found + _describe_class_properties(value, seen)


def _describe_model(value: BaseModel, seen: set) -> list[PropertyDescriptor]:
    """Fields and computed fields of a pydantic model."""
    cls = type(value)
    model_frozen = bool(cls.model_config.get("frozen"))
    found = []

    for name, field in cls.model_fields.items():
        if _is_private(name) or name in seen:
            continue
        seen.add(name)
        found.append(PropertyDescriptor(
            name=name,
            declared_type=field.annotation,
            owner=cls,
            readable=True,
            writable=not (model_frozen or field.frozen),
        ))

    for name, computed in cls.model_computed_fields.items():
        if _is_private(name) or name in seen:
            continue
        seen.add(name)
        found.append(PropertyDescriptor(
            name=name,
            declared_type=computed.return_type,
            owner=cls,
            readable=True,
            writable=False,
        ))

    return found + _describe_class_properties(value, seen, skip_classes=BaseModel.__mro__)


def _describe_members(value: Any, seen: set) -> list[PropertyDescriptor]:
    """Annotated attributes, properties, slots and instance attributes of any other object."""
    cls = type(value)
    hints = _type_hints(cls)
    frozen = dataclasses.is_dataclass(cls) and cls.__dataclass_params__.frozen
    instance_dict = getattr(value, "__dict__", {})
    found = []

    for klass in reversed(cls.__mro__):
        if klass is object:
            continue

        for name, annotation in _own_annotations(klass).items():
            if _is_private(name) or name in seen:
                continue
            declared = hints.get(name, annotation)
            if _is_pseudo_field(declared):
                continue
            member = inspect.getattr_static(cls, name, None)
            if isinstance(member, property):
                # Handled with the other properties
                continue
            seen.add(name)
            found.append(PropertyDescriptor(
                name=name,
                declared_type=declared,
                owner=cls,
                readable=name in instance_dict or hasattr(value, name),
                writable=not frozen,
            ))

        for name, member in klass.__dict__.items():
            if _is_private(name) or name in seen or not isinstance(member, property):
                continue
            seen.add(name)
            found.append(_property_descriptor(value, cls, name, member))

        for name in _slot_names(klass):
            if _is_private(name) or name in seen:
                continue
            seen.add(name)
            readable = hasattr(value, name)
            found.append(PropertyDescriptor(
                name=name,
                declared_type=type(getattr(value, name)) if readable else None,
                owner=cls,
                readable=readable,
                writable=True,
            ))

    for name, current in instance_dict.items():
        if _is_private(name) or name in seen:
            continue
        seen.add(name)
        found.append(PropertyDescriptor(
            name=name,
            declared_type=type(current),
            owner=cls,
            readable=True,
            writable=not frozen,
        ))

    return found


# ============================================================
# PUBLIC API
# ============================================================

def _mapped_state(value: Any) -> Optional[InstanceState]:
    if isinstance(value, type):
        return None
    state = sa_inspect(value, raiseerr=False)
    return state if isinstance(state, InstanceState) else None


def describe_properties(value: Any) -> list[PropertyDescriptor]:
    """
    Describe every public property of a value, in declaration order.

    Never mutates the value. Properties without a return annotation are read
    once to learn their runtime type.
    """
    seen: set = set()

    state = _mapped_state(value)
    if state is not None:
        return _describe_mapped(value, state, seen)
    if isinstance(value, BaseModel):
        return _describe_model(value, seen)
    return _describe_members(value, seen)


def comparable_properties(value: Any) -> list[PropertyDescriptor]:
    """Readable properties of a value whose declared type is a comparable scalar."""
    return [prop for prop in describe_properties(value) if prop.readable and prop.comparable]


def include_all(prop: PropertyDescriptor) -> bool:
    """Default exclusion predicate: nothing is excluded."""
    return False


def exclude_names(*names: str) -> ExcludePredicate:
    """
    Build an exclusion predicate skipping properties by name.

    Example:
        is_equal_to(record, view, exclude=exclude_names("id", "updated_at"))
    """
    excluded = frozenset(names)

    def predicate(prop: PropertyDescriptor) -> bool:
        return prop.name in excluded

    return predicate


def select_properties(
    value: Any,
    exclude: Optional[ExcludePredicate] = None,
) -> list[PropertyDescriptor]:
    """Comparable properties of a value minus the excluded ones. The predicate runs once per property."""
    exclude = exclude or include_all
    return [prop for prop in comparable_properties(value) if not exclude(prop)]
