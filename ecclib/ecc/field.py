#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field Fp elements.

FieldElement is an immutable value: every operation
returns a new element, already reduced into [0, p).

Plain int operands are lifted into the field of the other operand,
so that expressions like 3 * x * x + a read as in textbooks.
"""

from dataclasses import dataclass
from typing import Union

from ecclib.ecc.number_theory import mod_inv
from ecclib.exceptions import ECDSAValueError
from ecclib.utils import HEX_THRESHOLD, hex_string


@dataclass(frozen=True)
class FieldElement:
    value: int
    p: int

    def __post_init__(self) -> None:
        if self.p < 2:
            raise ECDSAValueError(f"invalid field modulus: {self.p}")
        if not 0 <= self.value < self.p:
            object.__setattr__(self, "value", self.value % self.p)

    def _coerce(self, other: Union["FieldElement", int]) -> "FieldElement":
        if isinstance(other, FieldElement):
            if other.p != self.p:
                raise ECDSAValueError("field elements from different fields")
            return other
        if isinstance(other, int):
            return FieldElement(other, self.p)
        return NotImplemented

    def __add__(self, other: Union["FieldElement", int]) -> "FieldElement":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return FieldElement(self.value + other.value, self.p)

    __radd__ = __add__

    def __sub__(self, other: Union["FieldElement", int]) -> "FieldElement":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        # % p in __post_init__ wraps negative differences
        return FieldElement(self.value - other.value, self.p)

    def __rsub__(self, other: int) -> "FieldElement":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return FieldElement(other.value - self.value, self.p)

    def __mul__(self, other: Union["FieldElement", int]) -> "FieldElement":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return FieldElement(self.value * other.value, self.p)

    __rmul__ = __mul__

    def __neg__(self) -> "FieldElement":
        return FieldElement(-self.value, self.p)

    def __pow__(self, e: int) -> "FieldElement":
        if e < 0:
            raise ECDSAValueError(f"negative exponent: {e}")
        return FieldElement(pow(self.value, e, self.p), self.p)

    def __truediv__(self, other: Union["FieldElement", int]) -> "FieldElement":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self * other.inverse()

    def inverse(self) -> "FieldElement":
        """Return the multiplicative inverse.

        NotInvertible is raised for the zero element.
        """
        return FieldElement(mod_inv(self.value, self.p), self.p)

    def is_zero(self) -> bool:
        return self.value == 0

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        if self.p > HEX_THRESHOLD:
            return f"{hex_string(self.value)} mod {hex_string(self.p)}"
        return f"{self.value} mod {self.p}"
