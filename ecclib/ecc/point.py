#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve point in affine coordinates.

The point at infinity is encoded explicitly as CurvePoint(),
i.e. with both coordinates set to None, and it is exported as INF.
No affine pair is reserved for it: on curves of even order
a point with y = 0 is a legitimate (order two) point.

A CurvePoint does not know its curve: use
CurveGroup.is_on_curve to check it.
"""

from dataclasses import dataclass
from typing import Optional

from ecclib.exceptions import InvalidPoint


@dataclass(frozen=True)
class CurvePoint:
    x: Optional[int] = None
    y: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.x is None) != (self.y is None):
            raise InvalidPoint("only one coordinate for a point")

    @property
    def is_identity(self) -> bool:
        return self.x is None

    def __repr__(self) -> str:
        if self.x is None:
            return "INF"
        return f"CurvePoint({self.x}, {self.y})"


INF = CurvePoint()
