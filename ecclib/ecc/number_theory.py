#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular inverse, for field elements (mod p) and scalars (mod n)."""

from typing import Tuple

from ecclib.exceptions import NotInvertible
from ecclib.utils import HEX_THRESHOLD, hex_string


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    Extended Euclidean algorithm, iterative version.
    """

    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a mod m.

    m is not required to be a prime: toy curves may have
    a composite order n.
    NotInvertible is raised if gcd(a, m) ≠ 1, zero included.
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g != 1:
        err_msg = "No inverse for "
        err_msg += f"{hex_string(a)}" if a > HEX_THRESHOLD else f"{a}"
        err_msg += " mod "
        err_msg += f"{hex_string(m)}" if m > HEX_THRESHOLD else f"{m}"
        raise NotInvertible(err_msg)
    return x % m
