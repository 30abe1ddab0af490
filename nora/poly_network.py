"""Evaluation of a flattened polynomial network as one matrix product."""

from __future__ import annotations

import logging
import math
from typing import Hashable, Iterable, Sequence

import numpy as np

from .basis import BasisTemplate
from .polynomial import Polynomial

__all__ = ["Coefficients", "PolynomialNetwork"]

logger = logging.getLogger(__name__)


class Coefficients:
    """Weights of each polynomial laid out against a basis.

    Row ``p`` holds the weights of polynomial ``p``; column ``r`` corresponds
    to row ``r`` of the basis template.
    """

    def __init__(
        self, polynomials: Sequence[Polynomial], basis_template: BasisTemplate
    ) -> None:
        self._num_polynomials = len(polynomials)
        self.matrix = np.zeros(
            (len(polynomials), basis_template.num_rows), dtype=np.float32
        )
        for poly_index, polynomial in enumerate(polynomials):
            for component in polynomial.components:
                operands = component.operands
                column = basis_template.position(lambda row: row == operands)
                if column is None:
                    raise ValueError(
                        f"term {component} is not part of the basis template"
                    )
                self.matrix[poly_index, column] = component.weight
        logger.debug("coefficients:\n%s", self.render())

    @property
    def shape(self) -> tuple[int, ...]:
        return self.matrix.shape

    def render(self) -> str:
        """A text listing of the weights, two decimals each.

        Lines are broken every ``len(polynomials)`` values.
        """
        values = [float(value) for value in self.matrix.ravel()]
        parts = ["[\n"]
        for index, value in enumerate(values):
            if index % self._num_polynomials == 0:
                if index != 0:
                    parts.append("]\n")
                parts.append("[")
            if math.copysign(1.0, value) > 0:
                parts.append(f" {value:.2f},")
            else:
                parts.append(f"{value:.2f},")
            if index == len(values) - 1:
                parts.append("]\n")
        parts.append("]\n")
        return "".join(parts)

    def __str__(self) -> str:
        return f"Coefficients({self.matrix.shape})"


class PolynomialNetwork:
    """A network whose outputs are polynomials of its inputs."""

    def __init__(self, coefficients: Coefficients, basis_template: BasisTemplate) -> None:
        self.coefficients = coefficients
        self.basis_template = basis_template

    @classmethod
    def from_polynomials(
        cls, polynomials: Iterable[Polynomial], input_ids: Iterable[Hashable]
    ) -> "PolynomialNetwork":
        """Build a network from output polynomials over the given input ids.

        The position of an id in ``input_ids`` is the position of its value
        in the inputs given to :meth:`predict`. Raises KeyError when a
        polynomial uses an id that is not listed.
        """
        positions = {input_id: index for index, input_id in enumerate(input_ids)}
        mapped = [polynomial.map_operands(positions) for polynomial in polynomials]
        for polynomial in mapped:
            polynomial.sort_by_exponent(0)

        logger.info("Polynomial List:")
        for polynomial in mapped:
            logger.info("%s", polynomial)

        basis_template = BasisTemplate.from_polynomials(mapped)
        logger.info("Basis:\n%s", basis_template)
        coefficients = Coefficients(mapped, basis_template)
        return cls(coefficients, basis_template)

    def predict(self, inputs: Sequence[float]) -> list[float]:
        """The value of every output polynomial for ``inputs``.

        Raises KeyError when fewer inputs are given than the network uses.
        """
        column = self.basis_template.make_tensor(enumerate(inputs))
        result = self.coefficients.matrix @ column
        return [float(value) for value in result.ravel()]