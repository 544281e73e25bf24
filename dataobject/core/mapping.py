"""
Mapping tables between source and target property names.

A mapping table is an ordered sequence of Map entries. Lookups are by source
name and the first match wins, so duplicate source names are allowed but only
the first one has any effect.
"""
import logging
from typing import Any, Callable, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

logger = logging.getLogger(__name__)


def _identity(value: Any) -> Any:
    return value


def _is_blank(name: Optional[str]) -> bool:
    return name is None or not name.strip()


class Map(BaseModel):
    """
    Maps a source property onto a differently named target property.

    `convert` turns the source value into the value the target expects and
    defaults to the identity. Either both names are given or neither is; a Map
    with blank names is empty and stands for "no explicit mapping".
    """
    model_config = ConfigDict(frozen=True)

    source_name: Optional[str] = None
    target_name: Optional[str] = None
    convert: Callable[[Any], Any] = _identity

    def __init__(
        self,
        source_name: Optional[str] = None,
        target_name: Optional[str] = None,
        convert: Optional[Callable[[Any], Any]] = None,
        **data: Any,
    ):
        super().__init__(source_name=source_name, target_name=target_name, convert=convert, **data)

    @field_validator("convert", mode="before")
    @classmethod
    def _default_convert(cls, value: Any) -> Any:
        return _identity if value is None else value

    @model_validator(mode="after")
    def _check_names(self) -> "Map":
        if _is_blank(self.source_name) != _is_blank(self.target_name):
            raise ValueError(
                "One of 'source_name', 'target_name' is None, empty or white space while "
                "the other isn't. Either both must be None or both must be valid names."
            )
        return self

    @property
    def is_empty(self) -> bool:
        return _is_blank(self.source_name) or _is_blank(self.target_name)


EMPTY_MAP = Map()

MapEntry = Union[Map, dict]


def validate_mappings(mappings: Optional[Iterable[MapEntry]]) -> tuple[Map, ...]:
    """
    Normalise a caller supplied mapping table.

    Map entries pass through, dictionaries are validated into Map entries.
    None means an empty table.

    Raises:
        TypeError: if the table or one of its entries has the wrong type
        pydantic.ValidationError: if a dictionary entry is not a valid Map
    """
    if mappings is None:
        return ()
    if isinstance(mappings, (Map, dict, str)):
        raise TypeError("A mapping table must be a sequence of Map entries")

    table = []
    source_names = set()

    for entry in mappings:
        if isinstance(entry, dict):
            entry = Map.model_validate(entry)
        elif not isinstance(entry, Map):
            raise TypeError(f"Mapping table entries must be Map instances, got {type(entry).__name__}")

        if not entry.is_empty:
            if entry.source_name in source_names:
                logger.debug(f"Mapping for '{entry.source_name}' is shadowed by an earlier entry")
            source_names.add(entry.source_name)
        table.append(entry)

    return tuple(table)


def find_map(mappings: Iterable[Map], source_name: str) -> Map:
    """First entry for a source property name, EMPTY_MAP if there is none."""
    for entry in mappings:
        if entry.source_name == source_name:
            return entry
    return EMPTY_MAP
