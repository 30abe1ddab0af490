"""Weighted input connections of a polynomial neuron."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["PolyInput"]

I = TypeVar("I")


@dataclass
class PolyInput(Generic[I]):
    """A connection from ``input`` contributing ``weight * value ** exponent``."""

    input: I
    weight: float
    exponent: int

    @classmethod
    def random(cls, input: I, rng: random.Random) -> "PolyInput[I]":
        """A connection with a weight in [-1, 1] and an exponent in {0, 1, 2}."""
        weight = rng.uniform(-1.0, 1.0)
        exponent = rng.randint(0, 2)
        return cls(input, weight, exponent)

    def adjust_weight(self, by: float) -> None:
        """Add ``by`` to the weight."""
        self.weight += by

    def adjust_exp(self, by: int) -> None:
        """Add ``by`` to the exponent."""
        self.exponent += by