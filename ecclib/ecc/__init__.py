#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module ecclib.ecc."""

from ecclib.ecc.curve import CURVES, Curve, CurveParams, load_curves, mult, secp256k1
from ecclib.ecc.curve_group import CurveGroup, mult_aff, mult_mont_ladder
from ecclib.ecc.field import FieldElement
from ecclib.ecc.point import INF, CurvePoint

__all__ = [
    "CURVES",
    "Curve",
    "CurveParams",
    "load_curves",
    "mult",
    "secp256k1",
    "CurveGroup",
    "mult_aff",
    "mult_mont_ladder",
    "FieldElement",
    "INF",
    "CurvePoint",
]
