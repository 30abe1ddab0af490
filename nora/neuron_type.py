"""Neuron kinds and the properties of neurons that take inputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from .poly_input import PolyInput

__all__ = ["PropsType", "NeuronType", "PolyProps"]

I = TypeVar("I")


class PropsType(Enum):
    """Kinds of neuron that have incoming connections."""

    HIDDEN = "Hidden"
    OUTPUT = "Output"

    def __str__(self) -> str:
        return self.value


class NeuronType(Enum):
    """The role a neuron plays in a network."""

    INPUT = "Input"
    HIDDEN = "Hidden"
    OUTPUT = "Output"

    @classmethod
    def from_props_type(cls, props_type: PropsType) -> "NeuronType":
        """The neuron type matching a kind of neuron with inputs."""
        return _FROM_PROPS[props_type]

    def __str__(self) -> str:
        return self.value


_FROM_PROPS = {
    PropsType.HIDDEN: NeuronType.HIDDEN,
    PropsType.OUTPUT: NeuronType.OUTPUT,
}


@dataclass
class PolyProps(Generic[I]):
    """The kind and incoming connections of a hidden or output neuron."""

    props_type: PropsType
    inputs: list[PolyInput[I]] = field(default_factory=list)

    @classmethod
    def hidden(cls, inputs: list[PolyInput[I]]) -> "PolyProps[I]":
        """Properties of a hidden neuron with the given connections."""
        return cls(PropsType.HIDDEN, list(inputs))

    @classmethod
    def output(cls, inputs: list[PolyInput[I]]) -> "PolyProps[I]":
        """Properties of an output neuron with the given connections."""
        return cls(PropsType.OUTPUT, list(inputs))

    def num_inputs(self) -> int:
        """The number of incoming connections."""
        return len(self.inputs)