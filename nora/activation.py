"""Random building blocks for polynomial activation functions.

A polynomial neuron computes ``sum(weight_i * input_i ** exponent_i) + bias``.
These helpers draw fresh bias and exponent values when a network is created
or mutated.
"""

from __future__ import annotations

import random

__all__ = ["random_bias", "random_exponent"]


def random_bias(rng: random.Random) -> float:
    """Draw a bias uniformly from the half-open range [0, 1)."""
    return rng.random()


def random_exponent(rng: random.Random) -> int:
    """Draw an exponent that is either 0 (constant input) or 1 (linear input)."""
    return rng.randint(0, 1)