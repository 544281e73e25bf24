"""
Sample data objects shared by the tests.

Covers every kind of value the engine introspects: SQLAlchemy mapped
classes, pydantic models, dataclasses, plain and slotted classes.
"""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum as PyEnum
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, computed_field
from sqlalchemy import Boolean, Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import declarative_base, relationship

from dataobject import DataObjectMixin

Base = declarative_base()


class AccountState(str, PyEnum):
    ACTIVE = "active"
    RETIRED = "retired"


# ============================================================
# PERSISTENCE MODELS
# ============================================================

class GroupRecord(Base):
    __tablename__ = "groups"

    id = Column(String(50), primary_key=True)
    name = Column(String(100), nullable=False)


class UserRecord(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False)
    full_name = Column(String(100), nullable=False)
    is_active = Column(Boolean, default=True)
    group_id = Column(String(50), ForeignKey("groups.id"), nullable=True)

    group = relationship("GroupRecord")


class PriceRecord(Base):
    __tablename__ = "prices"

    id = Column(Integer, primary_key=True)
    price = Column(Numeric(10, 2), nullable=False)


# ============================================================
# VIEW MODELS
# ============================================================

class PriceView(BaseModel):
    id: int = 0
    price: float = 0.0


class UserView(BaseModel):
    id: int = 0
    username: str = ""
    full_name: str = ""
    is_active: bool = False
    group_id: Optional[str] = None


class StrictUserView(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: int = 0
    username: str = ""


class FrozenUserView(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = 0
    username: str = ""


class DisplayUserView(BaseModel):
    username: str = ""
    full_name: str = ""

    @computed_field
    @property
    def label(self) -> str:
        return f"{self.full_name} ({self.username})"


# ============================================================
# DATACLASSES
# ============================================================

@dataclass
class UserData:
    id: int = 0
    username: str = ""
    full_name: str = ""
    is_active: bool = False
    group_id: Optional[str] = None


@dataclass
class UserSummary:
    username: str = ""
    full_name: str = ""


@dataclass(frozen=True)
class FrozenUserData:
    id: int = 0
    username: str = ""


@dataclass
class Asset:
    asset_name: str = ""
    version: Optional[str] = None
    state: AccountState = AccountState.ACTIVE
    installed: Optional[date] = None
    tags: list = field(default_factory=list)
    owner: Optional[UserData] = None
    _revision: int = 0

    kind: ClassVar[str] = "asset"


@dataclass
class InputField(DataObjectMixin):
    Validate: bool = True
    NumberOfChars: int = 5


@dataclass
class FieldState(DataObjectMixin):
    IsValid: str = ""
    IsEmpty: bool = False


@dataclass
class Loose:
    count: Any = None


@dataclass
class Counter:
    count: int = 0


# ============================================================
# PLAIN CLASSES
# ============================================================

class Plain:
    def __init__(self, name="plain", size=3, items=None):
        self.name = name
        self.size = size
        self.items = items or [1, 2]
        self._cache = {}


class Person:
    def __init__(self, first: str, last: str):
        self._first = first
        self._last = last

    @property
    def first(self) -> str:
        return self._first

    @first.setter
    def first(self, value: str) -> None:
        self._first = value

    @property
    def full(self) -> str:
        return f"{self._first} {self._last}"

    @property
    def initials(self):
        return self._first[:1] + self._last[:1]


class Point:
    __slots__ = ("x", "y")

    def __init__(self, x, y):
        self.x = x
        self.y = y


class UserModel(DataObjectMixin, BaseModel):
    id: int = 0
    username: str = ""


class Gauge:
    def __init__(self, level: int):
        self.level = level

    @property
    def reading(self):
        raise RuntimeError("sensor offline")


@dataclass
class Note:
    text: str = ""
