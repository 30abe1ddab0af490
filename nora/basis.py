"""The basis of monomials shared by a set of polynomials.

Every distinct product of variable powers that appears in any of the
polynomials becomes one row of the basis. Evaluating the basis for concrete
variable values gives a column vector which, multiplied by a coefficient
matrix, yields the value of every polynomial at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Hashable, Iterable, Optional, Sequence, TypeVar

import numpy as np

from .polynomial import Polynomial, Variable

__all__ = ["BasisTemplate", "basis_from_poly_list"]

T = TypeVar("T", bound=Hashable)


def basis_from_poly_list(polynomials: Iterable[Polynomial[T]]) -> list[list[Variable[T]]]:
    """Every distinct operand list of the polynomials, in order of first appearance."""
    used: list[list[Variable[T]]] = []
    for polynomial in polynomials:
        for component in polynomial.components:
            if component.operands not in used:
                used.append(list(component.operands))
    return used


@dataclass
class BasisTemplate(Generic[T]):
    """Rows of monomials; evaluating them gives a single-column matrix."""

    rows: list[list[Variable[T]]] = field(default_factory=list)

    @classmethod
    def from_polynomials(cls, polynomials: Iterable[Polynomial[T]]) -> "BasisTemplate[T]":
        """The basis spanning every term of ``polynomials``."""
        return cls(basis_from_poly_list(polynomials))

    @property
    def num_rows(self) -> int:
        """The number of monomials, which is the row count of the evaluated column."""
        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def position(self, predicate: Callable[[list[Variable[T]]], bool]) -> Optional[int]:
        """Index of the first row satisfying ``predicate``, or None."""
        return next(
            (index for index, row in enumerate(self.rows) if predicate(row)), None
        )

    def get(self, index: int) -> Optional[Sequence[Variable[T]]]:
        """The row at ``index``, or None when it is out of range."""
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def make_tensor(self, variables: Iterable[tuple[T, float]]) -> np.ndarray:
        """Evaluate each monomial for the given ``(variable, value)`` pairs.

        Returns a float32 array of shape ``(num_rows, 1)``. Raises KeyError
        when a variable used by the basis has no value.
        """
        values = dict(variables)
        column = np.ones((len(self.rows), 1), dtype=np.float32)
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            for index, row in enumerate(self.rows):
                running = np.float32(1.0)
                for variable in row:
                    try:
                        value = values[variable.var]
                    except KeyError:
                        raise KeyError(
                            f"input val not found: {variable.var!r}"
                        ) from None
                    running *= np.float32(value) ** np.float32(variable.exponent)
                column[index, 0] = running
        return column

    def __str__(self) -> str:
        if not self.rows:
            return "[]"
        lines = ["", "["]
        for index, row in enumerate(self.rows):
            cells = "".join(f"{str(variable):>5}," for variable in row)
            lines.append(f"{index} [{cells}]")
        return "\n".join(lines) + "\n]"