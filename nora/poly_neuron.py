"""Neurons of a polynomial network.

A neuron without properties is an input neuron; one with properties is a
hidden or output neuron, depending on the properties' kind.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from .neuron_type import NeuronType, PolyProps
from .poly_input import PolyInput

__all__ = ["PolyNeuron", "Neuron"]

N = TypeVar("N")
I = TypeVar("I")


class PolyNeuron(Generic[N, I]):
    """A neuron's inner value together with its optional properties."""

    def __init__(self, inner: N, props: Optional[PolyProps[I]] = None) -> None:
        self.inner = inner
        self.props = props

    def inputs(self) -> Optional[list[PolyInput[I]]]:
        """The incoming connections, or None for an input neuron."""
        return None if self.props is None else self.props.inputs

    def neuron_type(self) -> NeuronType:
        """The role of this neuron, derived from its properties."""
        if self.props is None:
            return NeuronType.INPUT
        return NeuronType.from_props_type(self.props.props_type)

    def is_input(self) -> bool:
        return self.neuron_type() is NeuronType.INPUT

    def is_hidden(self) -> bool:
        return self.neuron_type() is NeuronType.HIDDEN

    def is_output(self) -> bool:
        return self.neuron_type() is NeuronType.OUTPUT

    def __repr__(self) -> str:
        return f"PolyNeuron(inner={self.inner!r}, props={self.props!r})"


class Neuron(ABC, Generic[N, I]):
    """Base for types that wrap a :class:`PolyNeuron` and expose its queries."""

    @abstractmethod
    def inner(self) -> PolyNeuron[N, I]:
        """The wrapped neuron."""

    def inputs(self) -> Optional[list[PolyInput[I]]]:
        return self.inner().inputs()

    def props(self) -> Optional[PolyProps[I]]:
        return self.inner().props

    def neuron_type(self) -> NeuronType:
        return self.inner().neuron_type()

    def is_input(self) -> bool:
        return self.inner().is_input()

    def is_hidden(self) -> bool:
        return self.inner().is_hidden()

    def is_output(self) -> bool:
        return self.inner().is_output()