"""Symbolic polynomials used to flatten a polynomial network.

A :class:`Polynomial` is a sum of :class:`PolyComponent` terms. Each term is a
weight times a product of :class:`Variable` powers. Expanding a polynomial
raised to an integer power gives the closed form of a neuron's output in
terms of the network inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import cmp_to_key
from typing import Any, Generic, Iterable, Mapping, TypeVar, Union

__all__ = ["Variable", "PolyComponent", "Polynomial"]

T = TypeVar("T")
V = TypeVar("V")


def _format_weight(weight: float) -> str:
    weight = float(weight)
    if weight.is_integer():
        return str(int(weight))
    return repr(weight)


@dataclass(frozen=True, order=True)
class Variable(Generic[T]):
    """A variable raised to an integer power."""

    var: T
    exponent: int

    def map_operands(self, operands: Mapping[T, V]) -> "Variable[V]":
        """The same power of the variable that ``operands`` maps this one to.

        Raises KeyError when the variable has no mapping.
        """
        try:
            new_var = operands[self.var]
        except KeyError:
            raise KeyError(
                f"couldn't find {self.var!r} among operands {dict(operands)!r}"
            ) from None
        return Variable(new_var, self.exponent)

    def __str__(self) -> str:
        if self.exponent == 1:
            return f"[{self.var}]"
        return f"[{self.var}]^{self.exponent}"


@dataclass
class PolyComponent(Generic[T]):
    """A single term: ``weight`` times the product of ``operands``."""

    weight: float = 0.0
    operands: list[Variable[T]] = field(default_factory=list)

    @classmethod
    def simple(cls, weight: float, var: T, exponent: int) -> "PolyComponent[T]":
        """``weight * var ** exponent``; an exponent of 0 leaves a constant."""
        if exponent == 0:
            return cls(weight, [])
        return cls(weight, [Variable(var, exponent)])

    @classmethod
    def base(cls, weight: float) -> "PolyComponent[T]":
        """A constant term."""
        return cls(weight, [])

    @classmethod
    def from_raw_parts(
        cls, weight: float, operands: Iterable[Variable[T]]
    ) -> "PolyComponent[T]":
        """A term from sorted operands; duplicate variables are not merged."""
        return cls(weight, sorted(operands))

    def with_weight(self, weight: float) -> "PolyComponent[T]":
        """Set the weight and return this term."""
        self.weight = weight
        return self

    def with_operand(self, var: T, exponent: int) -> "PolyComponent[T]":
        """Multiply by ``var ** exponent``, merging powers of the same variable."""
        if exponent == 0:
            return self
        for index, operand in enumerate(self.operands):
            if operand.var == var:
                self.operands[index] = replace(
                    operand, exponent=operand.exponent + exponent
                )
                break
        else:
            self.operands.append(Variable(var, exponent))
            self.operands.sort()
            return self
        self.operands = [op for op in self.operands if op.exponent != 0]
        return self

    def map_operands(self, operands: Mapping[T, V]) -> "PolyComponent[V]":
        """This term with every variable replaced through ``operands``."""
        return PolyComponent(
            self.weight, [op.map_operands(operands) for op in self.operands]
        )

    def sort(self) -> None:
        """Sort the operands in place."""
        self.operands.sort()

    def exponent_of(self, var: Any) -> Union[int, None]:
        """The exponent of ``var`` in this term, or None when it is absent."""
        for operand in self.operands:
            if operand.var == var:
                return operand.exponent
        return None

    def copy(self) -> "PolyComponent[T]":
        return PolyComponent(self.weight, list(self.operands))

    def __mul__(self, other: Union["PolyComponent[T]", float]) -> "PolyComponent[T]":
        if isinstance(other, PolyComponent):
            operands = list(self.operands)
            for operand in other.operands:
                for index, existing in enumerate(operands):
                    if existing.var == operand.var:
                        operands[index] = replace(
                            existing, exponent=existing.exponent + operand.exponent
                        )
                        break
                else:
                    operands.append(operand)
            return PolyComponent(self.weight * other.weight, operands)
        if isinstance(other, (int, float)):
            return PolyComponent(self.weight * other, list(self.operands))
        return NotImplemented

    def __str__(self) -> str:
        text = "" if self.weight == 1 else _format_weight(self.weight)
        if len(self.operands) == 1:
            return text + str(self.operands[0])
        return text + "".join(f"({operand})" for operand in self.operands)


@dataclass
class Polynomial(Generic[T]):
    """A sum of terms; terms with the same operands are combined."""

    components: list[PolyComponent[T]] = field(default_factory=list)

    @classmethod
    def unit(cls, var: T) -> "Polynomial[T]":
        """The polynomial consisting of ``var`` alone."""
        return cls([PolyComponent.simple(1.0, var, 1)])

    def with_operation(self, weight: float, variable: T, exponent: int) -> "Polynomial[T]":
        """Add ``weight * variable ** exponent`` and return this polynomial."""
        return self.handle_operation(weight, variable, exponent)

    def with_polycomponent(self, component: PolyComponent[T]) -> "Polynomial[T]":
        """Add a term and return this polynomial."""
        return self.handle_polycomponent(component)

    def handle_operation(self, weight: float, variable: T, exponent: int) -> "Polynomial[T]":
        """Add ``weight * variable ** exponent`` in place."""
        return self.handle_polycomponent(PolyComponent.simple(weight, variable, exponent))

    def handle_polycomponent(self, component: PolyComponent[T]) -> "Polynomial[T]":
        """Add a term in place, merging it into a like term when one exists."""
        component = component.copy()
        component.sort()
        for existing in self.components:
            if existing.operands == component.operands:
                existing.weight += component.weight
                break
        else:
            self.components.append(component)
        return self

    def sort_by_exponent(self, order_on: T) -> None:
        """Order terms by the exponent of ``order_on``.

        Terms without that variable come first, ordered by weight.
        """
        for component in self.components:
            component.sort()

        def compare(a: PolyComponent[T], b: PolyComponent[T]) -> int:
            exp_a = a.exponent_of(order_on)
            exp_b = b.exponent_of(order_on)
            if exp_a is not None and exp_b is not None:
                return (exp_a > exp_b) - (exp_a < exp_b)
            if exp_a is not None:
                return 1
            if exp_b is not None:
                return -1
            return (a.weight > b.weight) - (a.weight < b.weight)

        self.components.sort(key=cmp_to_key(compare))

    def invert(self) -> None:
        """Negate every exponent of every term."""
        for component in self.components:
            component.operands = [
                replace(op, exponent=-op.exponent) for op in component.operands
            ]

    def _copy(self) -> "Polynomial[T]":
        return Polynomial([component.copy() for component in self.components])

    def _mul_expand(self, other: "Polynomial[T]") -> "Polynomial[T]":
        result: Polynomial[T] = Polynomial()
        for left in self.components:
            for right in other.components:
                result.handle_polycomponent(left * right)
        return result

    def expand(self, other: "Polynomial[T]", weight: float, exponent: int) -> "Polynomial[T]":
        """Add ``weight * other ** exponent`` in place, fully multiplied out."""
        if exponent == 0:
            return self.handle_polycomponent(PolyComponent.base(weight))

        running = other._copy()
        for _ in range(1, abs(exponent)):
            running = running._mul_expand(other)

        if exponent < 0:
            running.invert()

        running *= weight

        for component in running.components:
            self.handle_polycomponent(component)
        return self

    def map_operands(self, operands: Mapping[T, V]) -> "Polynomial[V]":
        """This polynomial with every variable replaced through ``operands``."""
        return Polynomial([c.map_operands(operands) for c in self.components])

    def __imul__(self, scalar: float) -> "Polynomial[T]":
        for component in self.components:
            component.weight *= scalar
        return self

    def __str__(self) -> str:
        return " + ".join(str(component) for component in self.components)