#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and scalar multiplication functions.

Note that CurveGroup does not have to be a cyclic subgroup.
For the cyclic subgroup class Curve, with generator G and order n,
see the ecclib.ecc.curve module.
"""

from typing import List

from ecclib.alias import Integer
from ecclib.ecc.field import FieldElement
from ecclib.ecc.point import INF, CurvePoint
from ecclib.exceptions import ECDSAValueError, InvalidCurveParameters, InvalidPoint
from ecclib.utils import HEX_THRESHOLD, hex_string, int_from_integer


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # 1) check that p is a prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            err_msg = "p is not prime: "
            err_msg += f"'{hex_string(p)}'" if p > HEX_THRESHOLD else f"{p}"
            raise InvalidCurveParameters(err_msg)

        plen = p.bit_length()
        # byte-length
        self.p_size = (plen + 7) // 8
        self.p = p

        # 2. check that a and b are integers in the interval [0, p−1]
        if a < 0:
            raise InvalidCurveParameters(f"negative a: {a}")
        if p <= a:
            err_msg = "p <= a: " + (
                f"'{hex_string(p)}' <= '{hex_string(a)}'"
                if p > HEX_THRESHOLD
                else f"{p} <= {a}"
            )
            raise InvalidCurveParameters(err_msg)
        if b < 0:
            raise InvalidCurveParameters(f"negative b: {b}")
        if p <= b:
            err_msg = "p <= b: " + (
                f"'{hex_string(p)}' <= '{hex_string(b)}'"
                if p > HEX_THRESHOLD
                else f"{p} <= {b}"
            )
            raise InvalidCurveParameters(err_msg)

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * a * a * a + 27 * b * b
        if d % p == 0:
            raise InvalidCurveParameters("zero discriminant")
        self._a = a
        self._b = b

    def __str__(self) -> str:
        result = "CurveGroup"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self._a > HEX_THRESHOLD or self._b > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self._a)}"
            result += f"\n b   = {hex_string(self._b)}"
        else:
            result += f"\n a   = {self._a}"
            result += f"\n b   = {self._b}"

        return result

    def __repr__(self) -> str:
        result = "CurveGroup("
        result += f"'{hex_string(self.p)}'" if self.p > HEX_THRESHOLD else f"{self.p}"
        if self._a > HEX_THRESHOLD or self._b > HEX_THRESHOLD:
            result += f", '{hex_string(self._a)}', '{hex_string(self._b)}'"
        else:
            result += f", {self._a}, {self._b}"

        result += ")"
        return result

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    def fe(self, value: int) -> FieldElement:
        "Return value as an element of the curve field Fp."
        return FieldElement(value, self.p)

    # methods using p: they could become functions

    def negate(self, Q: CurvePoint) -> CurvePoint:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if not isinstance(Q, CurvePoint):
            raise InvalidPoint("not a point")
        if Q.is_identity:
            return INF
        return CurvePoint(Q.x, (self.p - Q.y) % self.p)

    # methods using _a, _b, p

    def add(self, Q1: CurvePoint, Q2: CurvePoint) -> CurvePoint:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self._add(Q1, Q2)

    def double(self, Q: CurvePoint) -> CurvePoint:
        """Return the double of a point.

        The input point must be on the curve.
        """

        self.require_on_curve(Q)
        return self._double(Q)

    def _add(self, Q: CurvePoint, R: CurvePoint) -> CurvePoint:
        # points are assumed to be on curve

        # to have this function performing the same operations for any input,
        # INF, opposite points, and doubling are not handled as special cases
        # here, but taken care of at the end, after having performed all
        # calculations, even if useless

        # INF takes part in the calculations with (0, 0) coordinates
        x1 = self.fe(Q.x or 0)
        y1 = self.fe(Q.y or 0)
        x2 = self.fe(R.x or 0)
        y2 = self.fe(R.y or 0)

        same_x = x1 == x2
        # Fermat inversion z ** (p - 2) maps zero to zero,
        # where z.inverse() would raise NotInvertible
        lam_chord = (y2 - y1) * (x2 - x1) ** (self.p - 2)
        lam_tangent = (3 * x1 * x1 + self._a) * (2 * y1) ** (self.p - 2)
        lam = (lam_chord, lam_tangent)[same_x]
        x3 = lam * lam - x1 - x2
        y3 = lam * (x1 - x3) - y1

        # possible return values are:
        ret_values = (CurvePoint(x3.value, y3.value), INF, Q, Q, R, R, R, R)
        #    opposite  +  R==INF * 2  +  Q==INF * 4
        #           0  +          0  +          0  = 0 → chord or tangent sum
        #           1  +          0  +          0  = 1 → INF
        #           *  +          1  +          0  = 2, 3 → Q
        #           *  +          *  +          1  = 4, 5, 6, 7 → R
        opposite = same_x and (y1 + y2).is_zero()
        i = opposite + R.is_identity * 2 + Q.is_identity * 4
        return ret_values[i]

    def _double(self, Q: CurvePoint) -> CurvePoint:
        # point is assumed to be on curve
        # a point with y = 0 is its own opposite, so its double is INF
        return self._add(Q, Q)

    def _y2(self, x: int) -> int:
        return ((x * x + self._a) * x + self._b) % self.p

    def require_on_curve(self, Q: CurvePoint) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise InvalidPoint("point not on curve")

    def is_on_curve(self, Q: CurvePoint) -> bool:
        """Return True if the point is on the curve."""
        if not isinstance(Q, CurvePoint):
            raise InvalidPoint("not a point")
        if Q.is_identity:
            return True
        if not (0 <= Q.x < self.p and 0 <= Q.y < self.p):
            return False
        return self._y2(Q.x) == (Q.y * Q.y % self.p)


def _scalar_bits(m: int, ec: CurveGroup) -> List[int]:
    # Hasse theorem: p.bit_length() + 1 bits hold any scalar
    # smaller than the group order, the same width for all of them
    if m < 0:
        raise ECDSAValueError(f"negative m: {hex(m)}")
    width = max(ec.p.bit_length() + 1, m.bit_length())
    return [(m >> i) & 1 for i in reversed(range(width))]


def mult_aff(m: int, Q: CurvePoint, ec: CurveGroup) -> CurvePoint:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'left-to-right' binary decomposition of the m coefficient,
    affine coordinates.

    Each bit costs one doubling and one addition,
    whatever its value, and m is zero-padded to the bit length
    of p plus one: every scalar below the group order
    takes the same number of group operations.

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n
    if appropriate
    (e.g. cyclic groups of order n).
    """

    # R[0] is the running result, R[1] = R[0] + Q is an ancillary variable
    R = [INF, INF]
    for i in _scalar_bits(m, ec):
        # the doubling part of 'double & add'
        R[0] = ec._double(R[0])
        # always perform the 'add', even if useless
        R[1] = ec._add(R[0], Q)
        # but use it as R[0] only if the current bit of m is 1
        R[0] = R[i]
    return R[0]


def mult_mont_ladder(m: int, Q: CurvePoint, ec: CurveGroup) -> CurvePoint:
    """Scalar multiplication using 'Montgomery ladder' algorithm.

    This implementation uses
    'Montgomery ladder' algorithm,
    'left-to-right' binary decomposition of the m coefficient,
    affine coordinates.

    It performs one addition and one doubling per bit
    (see https://eprint.iacr.org/2014/140.pdf)
    and it keeps R[1] - R[0] = Q at every step.
    As in mult_aff, m is zero-padded to a fixed bit length.

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n
    if appropriate
    (e.g. cyclic groups of order n).
    """

    # R[0] is the running result, R[1] = R[0] + Q is an ancillary variable
    R = [INF, Q]
    for i in _scalar_bits(m, ec):
        R[not i] = ec._add(R[i], R[not i])
        R[i] = ec._double(R[i])
    return R[0]


_mult = mult_aff
