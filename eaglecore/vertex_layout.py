"""Vertex attribute formats and the layout of vertex input bindings."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class Format(Enum):
    """Attribute data formats, each with its size in bytes."""

    size: int

    def __new__(cls, code: int, size: int) -> "Format":
        member = object.__new__(cls)
        member._value_ = code
        member.size = size
        return member

    UNDEFINED = (0, 0)
    R8_UNORM = (1, 1)
    R8G8_UNORM = (2, 2)
    R8G8B8_UNORM = (3, 3)
    R8G8B8A8_UNORM = (4, 4)
    B8G8R8A8_UNORM = (5, 4)
    R16_SFLOAT = (6, 2)
    R16G16_SFLOAT = (7, 4)
    R16G16B16A16_SFLOAT = (8, 8)
    R32_SFLOAT = (9, 4)
    R32G32_SFLOAT = (10, 8)
    R32G32B32_SFLOAT = (11, 12)
    R32G32B32A32_SFLOAT = (12, 16)
    R32_SINT = (13, 4)
    R32G32_SINT = (14, 8)
    R32G32B32_SINT = (15, 12)
    R32G32B32A32_SINT = (16, 16)
    R32_UINT = (17, 4)
    R32G32_UINT = (18, 8)
    R32G32B32_UINT = (19, 12)
    R32G32B32A32_UINT = (20, 16)
    D32_SFLOAT = (21, 4)


class VertexInputRate(Enum):
    """Whether a binding advances per vertex or per instance."""

    VERTEX = 0
    INSTANCE = 1


@dataclass
class VertexInputBindingDescription:
    """The attributes read from one vertex buffer binding."""

    attributes: list[Format] = field(default_factory=list)
    input_rate: VertexInputRate = VertexInputRate.VERTEX

    def stride(self) -> int:
        """Bytes per element: the sum of the attribute sizes."""
        return sum(attribute.size for attribute in self.attributes)


class VertexLayout:
    """An ordered set of vertex input bindings."""

    def __init__(self) -> None:
        self._bindings: list[VertexInputBindingDescription] = []

    def add(self, binding: int, attribute: Format) -> None:
        """Append an attribute to binding ``binding``, creating bindings up to it."""
        if binding < 0:
            raise IndexError(f"binding index must not be negative: {binding}")
        while len(self._bindings) <= binding:
            self._bindings.append(VertexInputBindingDescription())
        self._bindings[binding].attributes.append(attribute)

    def add_binding(self, binding: VertexInputBindingDescription) -> None:
        """Append a whole binding description."""
        self._bindings.append(copy.deepcopy(binding))

    def stride(self) -> int:
        """The sum of all binding strides."""
        return sum(binding.stride() for binding in self._bindings)

    def attribute_count(self) -> int:
        """Number of attributes over all bindings."""
        return sum(len(binding.attributes) for binding in self._bindings)

    def binding_count(self) -> int:
        """Number of bindings."""
        return len(self._bindings)

    def bindings(self) -> tuple[VertexInputBindingDescription, ...]:
        """The bindings, in order."""
        return tuple(self._bindings)

    def binding(self, index: int) -> VertexInputBindingDescription:
        """A copy of the binding at ``index``."""
        return copy.deepcopy(self._bindings[index])

    def __getitem__(self, index: int) -> VertexInputBindingDescription:
        return self.binding(index)

    def __iter__(self) -> Iterator[VertexInputBindingDescription]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)