#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecclib.ecc.point` module."

import pytest

from ecclib.ecc.point import INF, CurvePoint
from ecclib.exceptions import InvalidPoint


def test_point() -> None:
    assert INF == CurvePoint()
    assert INF.is_identity
    assert INF.x is None and INF.y is None
    assert repr(INF) == "INF"

    P = CurvePoint(4, 0)
    assert not P.is_identity
    assert P != INF
    assert repr(P) == "CurvePoint(4, 0)"
    assert P == CurvePoint(4, 0)
    assert hash(P) == hash(CurvePoint(4, 0))
    assert len({INF, P, CurvePoint(4, 0), CurvePoint()}) == 2

    # immutable
    with pytest.raises(AttributeError):
        P.y = 1  # type: ignore


def test_exceptions() -> None:
    with pytest.raises(InvalidPoint, match="only one coordinate for a point"):
        CurvePoint(4)
    with pytest.raises(InvalidPoint, match="only one coordinate for a point"):
        CurvePoint(None, 0)
