# src/shape_assert/base/descriptor.py

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .exceptions import InvalidDescriptorError

log = logging.getLogger(__name__)

OPTIONAL_SUFFIX = "?"


class ContainerKind(str, Enum):
    ARRAY = "array"
    MAP = "map"
    SET = "set"

    @classmethod
    def parse(cls, name: str) -> Optional["ContainerKind"]:
        """Look up a container kind by name, ignoring case."""
        try:
            return cls(name.lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class ContainerDescriptor:
    """A parsed ``Kind<Element>`` descriptor."""

    kind_name: str
    element: str

    @property
    def kind(self) -> Optional[ContainerKind]:
        return ContainerKind.parse(self.kind_name)


def strip_optional(descriptor: str) -> Tuple[str, bool]:
    """Split a trailing ``?`` off a descriptor."""
    if descriptor.endswith(OPTIONAL_SUFFIX):
        return descriptor[: -len(OPTIONAL_SUFFIX)], True
    return descriptor, False


def parse_container(descriptor: str) -> Optional[ContainerDescriptor]:
    """
    Recognize the ``Kind<Element>`` form of a type descriptor.

    Returns None when the descriptor has no ``<``. The kind is everything
    before the first ``<`` and the element is everything up to the first
    ``>`` after it; anything after that ``>`` is ignored. The kind is not
    checked here; unknown kinds are rejected by the caller.

    Raises:
        InvalidDescriptorError: If the angle brackets do not frame a usable
            kind and element, or the element is itself a container.
    """
    start = descriptor.find("<")
    if start == -1:
        return None

    end = descriptor.find(">", start)
    if end == -1:
        log.warning(f"Descriptor '{descriptor}' has no closing '>'")
        raise InvalidDescriptorError(
            f"container type '{descriptor}' is missing a closing '>'"
        )

    kind_name = descriptor[:start]
    element = descriptor[start + 1 : end]
    if not kind_name:
        raise InvalidDescriptorError(
            f"not set container type for type '{descriptor}'"
        )
    if not element:
        raise InvalidDescriptorError(f"not set element type for type '{descriptor}'")
    if "<" in element:
        log.warning(f"Nested container descriptor rejected: '{descriptor}'")
        raise InvalidDescriptorError(
            f"nested container type '{descriptor}' is not supported"
        )

    log.debug(f"Parsed container descriptor '{descriptor}': {kind_name}<{element}>")
    return ContainerDescriptor(kind_name, element)
