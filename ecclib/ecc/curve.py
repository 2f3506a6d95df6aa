#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class, curve parameters, and scalar multiplication.

Curve parameters are the only configuration of the package:
they are provided as CurveParams records, possibly loaded
from a JSON document where integers are hex-strings, e.g.

    {"ec23_28": {"p": "0x17", "a": "0x01", "b": "0x01",
                 "x_G": "0x03", "y_G": "0x0a", "n": "0x1c"}}

The packaged curves are
SEC 2 v.2 curves (http://www.secg.org/sec2-v2.pdf)
and secp160r1 from SEC 2 v.1 (http://www.secg.org/SEC2-Ver-1.0.pdf),
used for the GEC 2 test vectors.
"""

import json
import logging
from dataclasses import dataclass, field
from math import isqrt
from os import path
from typing import Any, Dict, Optional, Sequence, Type, TypeVar, Union

from dataclasses_json import DataClassJsonMixin, config

from ecclib.alias import Integer
from ecclib.ecc.curve_group import CurveGroup, _mult
from ecclib.ecc.point import CurvePoint
from ecclib.exceptions import InvalidCurveParameters
from ecclib.utils import HEX_THRESHOLD, hex_string, int_from_integer

logger = logging.getLogger(__name__)


def _hex_field() -> Any:
    return field(metadata=config(encoder=hex, decoder=int_from_integer))


@dataclass(frozen=True)
class CurveParams(DataClassJsonMixin):
    """Immutable record of elliptic curve domain parameters.

    The curve y^2 = x^3 + a*x + b over Fp,
    with generator G = (x_G, y_G) of order n.
    """

    p: int = _hex_field()
    a: int = _hex_field()
    b: int = _hex_field()
    x_G: int = _hex_field()
    y_G: int = _hex_field()
    n: int = _hex_field()


_Curve = TypeVar("_Curve", bound="Curve")


class Curve(CurveGroup):
    """Cyclic subgroup of the points of an elliptic curve over Fp.

    The subgroup is generated by G and has order n:
    private keys and ephemeral keys are scalars mod n,
    while point coordinates are field elements mod p.
    """

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Union[CurvePoint, Sequence[Integer]],
        n: Integer,
    ) -> None:

        super().__init__(p, a, b)

        # 2. check that xG and yG are integers in the interval [0, p−1]
        # 4. Check that yG^2 = xG^3 + a*xG + b (mod p)
        if not isinstance(G, CurvePoint):
            if len(G) != 2:
                raise InvalidCurveParameters("Generator must a be a sequence[int, int]")
            G = CurvePoint(int_from_integer(G[0]), int_from_integer(G[1]))
        if G.is_identity:
            raise InvalidCurveParameters("INF point cannot be a generator")
        if not self.is_on_curve(G):
            raise InvalidCurveParameters("Generator is not on the curve")
        self.G = G

        n = int_from_integer(n)
        if n < 2:
            raise InvalidCurveParameters(f"n < 2: {n}")
        # Hasse theorem: a subgroup cannot be larger than the group
        if n > self.p + 1 + 2 * (isqrt(self.p) + 1):
            err_msg = "n greater than p+1+2*sqrt(p): "
            err_msg += f"{hex_string(n)}" if n > HEX_THRESHOLD else f"{n}"
            raise InvalidCurveParameters(err_msg)
        self.n = n
        self.nlen = n.bit_length()
        self.n_size = (self.nlen + 7) // 8

        # 7. Check that nG = INF
        if not _mult(n, self.G, self).is_identity:
            err_msg = "n is not the group order: "
            err_msg += f"{hex_string(n)}" if n > HEX_THRESHOLD else f"{n}"
            raise InvalidCurveParameters(err_msg)

    @classmethod
    def from_params(cls: Type[_Curve], params: CurveParams) -> _Curve:
        return cls(params.p, params.a, params.b, (params.x_G, params.y_G), params.n)

    @property
    def params(self) -> CurveParams:
        return CurveParams(self.p, self._a, self._b, self.G.x, self.G.y, self.n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return self.params == other.params

    def __hash__(self) -> int:
        return hash(self.params)

    def __str__(self) -> str:
        result = super().__str__().replace("CurveGroup", "Curve", 1)
        if self.p > HEX_THRESHOLD:
            result += f"\n x_G = {hex_string(self.G.x)}"
            result += f"\n y_G = {hex_string(self.G.y)}"
        else:
            result += f"\n x_G = {self.G.x}"
            result += f"\n y_G = {self.G.y}"
        if self.n > HEX_THRESHOLD:
            result += f"\n n   = {hex_string(self.n)}"
        else:
            result += f"\n n   = {self.n}"
        return result

    def __repr__(self) -> str:
        result = super().__repr__().replace("CurveGroup", "Curve", 1)[:-1]
        if self.p > HEX_THRESHOLD:
            result += f", ('{hex_string(self.G.x)}', '{hex_string(self.G.y)}')"
        else:
            result += f", ({self.G.x}, {self.G.y})"
        if self.n > HEX_THRESHOLD:
            result += f", '{hex_string(self.n)}'"
        else:
            result += f", {self.n}"
        result += ")"
        return result


def load_curves(filename: str) -> Dict[str, Curve]:
    "Return the validated curves of a JSON document of CurveParams."

    with open(filename, "r", encoding="ascii") as file_:
        curves_params = json.load(file_)

    curves = {
        ec_name: Curve.from_params(CurveParams.from_dict(params))
        for ec_name, params in curves_params.items()
    }
    logger.debug("loaded %d curves from %s", len(curves), filename)
    return curves


datadir = path.join(path.dirname(__file__), "_data")
CURVES = load_curves(path.join(datadir, "curves.json"))
secp256k1 = CURVES["secp256k1"]


def mult(
    m: Integer, Q: Optional[CurvePoint] = None, ec: Curve = secp256k1
) -> CurvePoint:
    """Elliptic curve scalar multiplication.

    Q defaults to the generator G of the curve and
    it is required to be on the curve.
    When Q is G, m is reduced mod n here, before the multiplication;
    any other point might lie outside the subgroup of order n
    (curves with a cofactor), so m is used as it is
    and it must not be negative.
    """
    m = int_from_integer(m)
    if Q is None or Q == ec.G:
        return _mult(m % ec.n, ec.G, ec)
    ec.require_on_curve(Q)
    return _mult(m, Q, ec)
