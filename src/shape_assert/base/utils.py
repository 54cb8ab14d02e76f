# src/shape_assert/base/utils.py

import copy
from collections.abc import Mapping, Sequence, Set
from dataclasses import fields, is_dataclass
from typing import Any, Iterator, Optional, Tuple

from pydantic import BaseModel

from .kinds import UNDEFINED, kind_of


def is_object_shaped(data: Any) -> bool:
    """
    Check whether a value can be read field by field.

    Mappings, dataclass instances, pydantic models and plain objects qualify.
    None, primitives, callables, sequences and sets do not.
    """
    if isinstance(data, Mapping):
        return True
    if data is None or kind_of(data) != "object":
        return False
    return not isinstance(data, (Sequence, Set, bytes, bytearray))


def iter_entries(data: Any) -> Optional[Iterator[Tuple[Any, Any]]]:
    """
    Return an iterator of ``(key, value)`` entries for a container value.

    Handles:
    - Mappings (keyed by mapping key)
    - Sequences other than strings and bytes (keyed by index)
    - Sets (keyed by enumeration position)
    - Other object-shaped values (keyed by field name)

    Returns None for anything else.
    """
    if isinstance(data, Mapping):
        return iter(data.items())
    if isinstance(data, (str, bytes, bytearray)):
        return None
    if isinstance(data, (Sequence, Set)):
        return enumerate(data)
    if is_object_shaped(data):
        return iter_fields(data)
    return None


def _model_field_name(model: BaseModel, name: str) -> str:
    model_fields = type(model).model_fields
    if name in model_fields:
        return name
    for field_name, info in model_fields.items():
        if info.alias == name:
            return field_name
    return name


def get_field(data: Any, name: str) -> Any:
    """
    Read one field of an object-shaped value.

    Pydantic models are read by field name, falling back from alias to field
    name. Absent fields come back as UNDEFINED.
    """
    if isinstance(data, Mapping):
        return data.get(name, UNDEFINED)
    if isinstance(data, BaseModel):
        name = _model_field_name(data, name)
    return getattr(data, name, UNDEFINED)


def iter_fields(data: Any) -> Iterator[Tuple[str, Any]]:
    """Iterate the own fields of an object-shaped value."""
    if isinstance(data, Mapping):
        yield from data.items()
    elif isinstance(data, BaseModel):
        for name in type(data).model_fields:
            yield name, getattr(data, name)
    elif is_dataclass(data):
        for f in fields(data):
            yield f.name, getattr(data, f.name)
    elif hasattr(data, "__dict__"):
        yield from vars(data).items()


def shallow_copy(data: Any) -> Any:
    """Copy a value one level deep."""
    if isinstance(data, BaseModel):
        return data.model_copy()
    if isinstance(data, Mapping):
        return dict(data)
    return copy.copy(data)
