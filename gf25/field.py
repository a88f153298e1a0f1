#!/usr/bin/env python3

# Copyright (C) 2024-2026 The gf25 developers
#
# This file is part of gf25. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of gf25 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""The finite field GF(5^2).

Elements are polynomials a + b*t over Z_5, reduced modulo the
irreducible polynomial t^2 + 2: the multiplication rule is then
driven by t^2 = -2 = 3 (mod 5).

The irreducibility of t^2 + 2 over Z_5 is a precondition of the
construction (3 is a quadratic non-residue mod 5): it is not checked.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Type

from gf25.alias import Coefficients
from gf25.exceptions import GF25TypeError, NonInvertibleElementError
from gf25.number_theory import mod_inv

# prime characteristic of the base field
P = 5
# t^2 + 2 = 0  =>  t^2 = -2 = 3 (mod 5)
T_SQUARE = 3
# number of field elements
ORDER = P * P


@dataclass(frozen=True)
class FieldElement:
    """Element a + b*t of GF(5^2).

    Both coefficients are always stored reduced in 0..4:
    the constructor folds any integer input modulo 5
    and every arithmetic result goes through the constructor.

    Integers are promoted to elements of the prime subfield,
    so that 3 * x or x + 1 are valid expressions.
    """

    a: int
    b: int

    def __init__(self, a: int = 0, b: int = 0) -> None:
        object.__setattr__(self, "a", _coefficient(a) % P)
        object.__setattr__(self, "b", _coefficient(b) % P)

    @classmethod
    def elements(cls: Type["FieldElement"]) -> Iterator["FieldElement"]:
        "Iterate over all the field elements, zero first."
        for a in range(P):
            for b in range(P):
                yield cls(a, b)

    @property
    def coefficients(self) -> Coefficients:
        return self.a, self.b

    def is_zero(self) -> bool:
        return self.a == 0 and self.b == 0

    def __str__(self) -> str:
        if self.b == 0:
            return f"{self.a}"
        if self.a == 0:
            return f"{self.b}t"
        return f"{self.a} + {self.b}t"

    def __add__(self, other: Any) -> "FieldElement":
        other = _promote(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.a + other.a, self.b + other.b)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "FieldElement":
        other = _promote(other)
        if other is None:
            return NotImplemented
        # coefficients are in 0..4: no negative intermediate
        return FieldElement(self.a + P - other.a, self.b + P - other.b)

    def __rsub__(self, other: Any) -> "FieldElement":
        other = _promote(other)
        if other is None:
            return NotImplemented
        return other - self

    def __neg__(self) -> "FieldElement":
        return FieldElement(P - self.a, P - self.b)

    def __mul__(self, other: Any) -> "FieldElement":
        """Return the product reduced with t^2 = 3.

        (a + b*t)(c + d*t) = (ac + 3bd) + (ad + bc)*t
        """
        other = _promote(other)
        if other is None:
            return NotImplemented
        a, b = self.a, self.b
        c, d = other.a, other.b
        return FieldElement(a * c + T_SQUARE * b * d, a * d + b * c)

    __rmul__ = __mul__

    def norm(self) -> int:
        "Return a^2 - 3b^2 (mod 5), i.e. x * conjugate(x)."
        return (self.a * self.a - T_SQUARE * self.b * self.b) % P

    def conjugate(self) -> "FieldElement":
        """Return a - b*t.

        This is also the Frobenius automorphism x -> x^5.
        """
        return FieldElement(self.a, -self.b)

    def inverse(self) -> "FieldElement":
        """Return the multiplicative inverse.

        (a + b*t)^-1 = (a - b*t) / (a^2 - 3b^2)

        The norm is zero only for the zero element,
        as t^2 + 2 is irreducible.
        """
        n = self.norm()
        if n == 0:
            raise NonInvertibleElementError(f"no inverse for {self}")
        n_inv = mod_inv(n, P)
        return FieldElement(self.a * n_inv, -self.b * n_inv)

    def __truediv__(self, other: Any) -> "FieldElement":
        other = _promote(other)
        if other is None:
            return NotImplemented
        if other.is_zero():
            raise NonInvertibleElementError(f"division by zero: {self} / 0")
        return self * other.inverse()

    def __rtruediv__(self, other: Any) -> "FieldElement":
        other = _promote(other)
        if other is None:
            return NotImplemented
        return other / self

    def __pow__(self, e: int) -> "FieldElement":
        "Square and multiply; negative exponents use the inverse."
        if not isinstance(e, int) or isinstance(e, bool):
            return NotImplemented
        base = self
        if e < 0:
            base, e = self.inverse(), -e
        result = ONE
        while e:
            if e & 1:
                result = result * base
            base = base * base
            e >>= 1
        return result


def _coefficient(i: Any) -> int:
    # bool is an int subclass, but True/False are not coefficients
    if isinstance(i, int) and not isinstance(i, bool):
        return i
    raise GF25TypeError(f"not an integer coefficient: {i!r}")


def _promote(other: Any) -> Any:
    if isinstance(other, FieldElement):
        return other
    if isinstance(other, int) and not isinstance(other, bool):
        return FieldElement(other)
    return None


ZERO = FieldElement(0, 0)
ONE = FieldElement(1, 0)
T = FieldElement(0, 1)
