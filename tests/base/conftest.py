# tests/base/conftest.py
import pytest
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional

from pydantic import BaseModel, Field as PydanticField


# --- Test Enums ---


class Color(IntEnum):
    RED = 1
    GREEN = 2


class Status(str, Enum):
    ACTIVE = "active"
    DISABLED = "disabled"


class Shape(Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    OTHER = None


NUMERIC_ENUM = {"A": 1, "B": 2}
STRING_ENUM = {"ON": "on", "OFF": "off"}


# --- Test Models ---


@dataclass
class Address:
    street: str
    zipcode: int
    tags: List[str] = field(default_factory=list)


class Profile(BaseModel):
    name: str
    age: int
    nick_name: Optional[str] = PydanticField(None, alias="nickName")


class PlainUser:
    def __init__(self, name, age):
        self.name = name
        self.age = age


def is_even(value):
    return isinstance(value, int) and value % 2 == 0


# --- Fixtures ---


@pytest.fixture
def user_rules():
    return {
        "name": "string",
        "age": {"type": "number?"},
        "active": "boolean",
        "tags": "array<string>",
        "color": {"type": "number", "check": Color},
    }


@pytest.fixture
def valid_user():
    return {
        "name": "alice",
        "active": True,
        "tags": ["a", "b"],
        "color": 2,
    }
