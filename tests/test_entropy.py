#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecclib.entropy` module."

import secrets

import pytest

from ecclib.entropy import random_scalar
from ecclib.exceptions import ECDSAValueError, RandomnessUnavailable


def test_random_scalar() -> None:
    for _ in range(100):
        assert 1 <= random_scalar(1, 28) < 28

    # single element range
    assert random_scalar(5, 6) == 5

    n = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
    assert 0 < random_scalar(1, n) < n


def test_exceptions(monkeypatch: pytest.MonkeyPatch) -> None:

    with pytest.raises(ECDSAValueError, match="empty range: "):
        random_scalar(5, 5)

    with pytest.raises(ECDSAValueError, match="empty range: "):
        random_scalar(28, 1)

    def no_entropy(_: int) -> int:
        raise OSError("no entropy")

    monkeypatch.setattr(secrets, "randbelow", no_entropy)
    with pytest.raises(RandomnessUnavailable, match="entropy source not available"):
        random_scalar(1, 28)
    # RandomnessUnavailable is a RuntimeError
    with pytest.raises(RuntimeError):
        random_scalar(1, 28)
