#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA).

Implementation according to SEC 1 v.2:

http://www.secg.org/sec1-v2.pdf

The message digest is provided by a hashlib constructor hf,
private keys and ephemeral keys (nonces) are drawn from
a randomness source rng(lower, upper),
see ecclib.entropy.random_scalar.

The digest is converted to an integer taking its leftmost nlen bits
(nlen being the bit length of the curve order n) and reducing it mod n,
as in SEC 1 v.2 section 4.1.3 step 5 and RFC6979 section 2.3.2.
"""

from __future__ import annotations

import logging
from dataclasses import InitVar, dataclass, field
from hashlib import sha256
from math import gcd

from ecclib.alias import HashF, Integer, Octets, RandomScalarF, String
from ecclib.ecc.curve import Curve, secp256k1
from ecclib.ecc.curve_group import _mult
from ecclib.ecc.number_theory import mod_inv
from ecclib.ecc.point import CurvePoint
from ecclib.entropy import random_scalar
from ecclib.exceptions import (
    ECDSARuntimeError,
    ECDSAValueError,
    EphemeralGenerationExhausted,
    InvalidPoint,
    InvalidSignature,
    NotInvertible,
)
from ecclib.hashes import reduce_to_hlen
from ecclib.utils import (
    HEX_THRESHOLD,
    bytes_from_octets,
    hex_string,
    int_from_bits,
    int_from_integer,
)

logger = logging.getLogger(__name__)

# nonces drawn at most for a single signature
MAX_NONCE_ATTEMPTS = 10


@dataclass(frozen=True)
class KeyPair:
    """ECDSA private/public key-pair.

    The private key is left out of repr,
    so that it does not end up in logs and tracebacks.
    """

    # scalar, 0 < prv_key < ec.n
    prv_key: int = field(repr=False)
    # prv_key * ec.G
    pub_key: CurvePoint


@dataclass(frozen=True)
class Sig:
    """ECDSA signature (r, s).

    No serialization format is provided:
    r and s are plain integers.
    """

    # scalar, 0 < r < ec.n (ec.n is the curve order)
    r: int
    # scalar, 0 < s < ec.n (ec.n is the curve order)
    s: int
    ec: Curve = secp256k1
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        # r is a scalar, fail if r is not in [1, n-1]
        if not 0 < self.r < self.ec.n:
            err_msg = "scalar r not in 1..n-1: "
            err_msg += f"'{hex_string(self.r)}'" if self.r > HEX_THRESHOLD else f"{self.r}"
            raise InvalidSignature(err_msg)

        # s is a scalar, fail if s is not in [1, n-1]
        if not 0 < self.s < self.ec.n:
            err_msg = "scalar s not in 1..n-1: "
            err_msg += f"'{hex_string(self.s)}'" if self.s > HEX_THRESHOLD else f"{self.s}"
            raise InvalidSignature(err_msg)


def int_from_prv_key(prv_key: Integer, ec: Curve = secp256k1) -> int:
    "Return a private key (or nonce) as an int in 1..n-1."

    q = int_from_integer(prv_key)
    if not 0 < q < ec.n:
        err_msg = "private key not in 1..n-1: "
        err_msg += f"'{hex_string(q)}'" if q > HEX_THRESHOLD else f"{q}"
        raise ECDSAValueError(err_msg)
    return q


def gen_keys(
    prv_key: Integer | None = None,
    ec: Curve = secp256k1,
    rng: RandomScalarF = random_scalar,
) -> KeyPair:
    """Return a private/public key-pair.

    If the private key is not provided, it is drawn from rng.
    """
    if prv_key is None:
        # d in the range [1, ec.n-1]
        prv_key = rng(1, ec.n)
    d = int_from_prv_key(prv_key, ec)

    Q = _mult(d, ec.G, ec)
    return KeyPair(d, Q)


def challenge_(msg_hash: Octets, ec: Curve = secp256k1, hf: HashF = sha256) -> int:
    # the message msg_hash: a hf_len array
    hf_len = hf().digest_size
    msg_hash = bytes_from_octets(msg_hash, hf_len)

    # leftmost ec.nlen bits %= ec.n
    return int_from_bits(msg_hash, ec.nlen) % ec.n


def _sign_(c: int, d: int, nonce: int, ec: Curve) -> Sig:
    # Private function for testing purposes: it allows to explore all
    # possible value of the challenge c (for low-cardinality curves).
    # It assumes that c is in [0, n-1], while d and nonce are in [1, n-1]
    # Steps numbering follows SEC 1 v.2 section 4.1.3
    K = _mult(nonce, ec.G, ec)  # 1
    if K.is_identity:  # x_K would be undefined
        raise ECDSARuntimeError("failed to sign: INF ephemeral point")

    # mod n makes the x_K field element a scalar
    r = K.x % ec.n  # 2, 3
    if r == 0:  # r≠0 required as it multiplies the public key
        raise ECDSARuntimeError("failed to sign: r = 0")

    # NotInvertible is raised here only if n is not a prime
    s = mod_inv(nonce, ec.n) * (c + r * d) % ec.n  # 6
    if s == 0:  # s≠0 required as verify will need the inverse of s
        raise ECDSARuntimeError("failed to sign: s = 0")
    if gcd(s, ec.n) != 1:  # same requirement, if n is not a prime
        raise ECDSARuntimeError("failed to sign: s not invertible")

    return Sig(r, s, ec)


def sign_(
    msg_hash: Octets,
    prv_key: Integer,
    nonce: Integer | None = None,
    ec: Curve = secp256k1,
    hf: HashF = sha256,
    rng: RandomScalarF = random_scalar,
) -> Sig:
    """Sign a hf_len bytes message digest according to ECDSA.

    If the nonce is provided, a single signing attempt is made
    and its failures are raised.
    Else nonces are drawn from rng, discarding those leading
    to a degenerate signature: EphemeralGenerationExhausted is raised
    if MAX_NONCE_ATTEMPTS nonces are discarded.
    """
    # the secret key d: an integer in the range 1..n-1.
    # SEC 1 v.2 section 3.2.1
    d = int_from_prv_key(prv_key, ec)

    # the challenge
    c = challenge_(msg_hash, ec, hf)  # 4, 5

    if nonce is not None:
        return _sign_(c, d, int_from_prv_key(nonce, ec), ec)

    for attempt in range(1, MAX_NONCE_ATTEMPTS + 1):
        # nonce: an integer in the range 1..n-1.
        k = int_from_prv_key(rng(1, ec.n), ec)  # 1
        try:
            return _sign_(c, d, k, ec)
        except NotInvertible:
            # the error message would disclose the nonce
            logger.debug("signing attempt %d discarded: nonce not invertible", attempt)
        except ECDSARuntimeError as e:
            logger.debug("signing attempt %d discarded: %s", attempt, e)

    err_msg = f"no valid nonce in {MAX_NONCE_ATTEMPTS} attempts"
    raise EphemeralGenerationExhausted(err_msg)


def sign(
    msg: String,
    prv_key: Integer,
    nonce: Integer | None = None,
    ec: Curve = secp256k1,
    hf: HashF = sha256,
    rng: RandomScalarF = random_scalar,
) -> Sig:
    """ECDSA signature.

    Implemented according to SEC 1 v.2
    The message msg is first processed by hf, yielding the value

        msg_hash = hf(msg),

    a sequence of bits of length *hf_len*.

    Normally, hf is chosen such that its output length *hf_len* is
    roughly equal to *nlen*, the bit-length of the group order *n*,
    since the overall security of the signature scheme will depend on
    the smallest of *hf_len* and *nlen*; however, the ECDSA standard
    supports all combinations of *hf_len* and *nlen*.
    """
    msg_hash = reduce_to_hlen(msg, hf)
    return sign_(msg_hash, prv_key, nonce, ec, hf, rng)


def _assert_as_valid_(c: int, Q: CurvePoint, r: int, s: int, ec: Curve) -> None:
    # Private function for test/dev purposes
    # Steps numbering follows SEC 1 v.2 section 4.1.4

    try:
        w = mod_inv(s, ec.n)
    except NotInvertible as e:  # only if n is not a prime
        raise InvalidSignature("scalar s not invertible") from e
    u1 = c * w % ec.n
    u2 = r * w % ec.n  # 4
    # Let K = u1*G + u2*Q.
    K = ec.add(_mult(u1, ec.G, ec), _mult(u2, Q, ec))  # 5

    # Fail if infinite(K).
    if K.is_identity:  # 5
        raise InvalidSignature("invalid (INF) key")

    # Fail if r ≠ x_K %n.
    if r != K.x % ec.n:  # 6, 7, 8
        raise InvalidSignature("signature verification failed")


def assert_as_valid_(
    msg_hash: Octets, key: CurvePoint, sig: Sig, hf: HashF = sha256
) -> None:
    # Private function for test/dev purposes
    # It raises Errors, while verify should always return True or False
    sig.assert_valid()
    ec = sig.ec

    # SEC 1 v.2 section 3.2.2.1: Q ≠ INF, on curve, n*Q = INF
    if key.is_identity or not ec.is_on_curve(key):
        raise InvalidPoint(f"not a valid public key: {key}")
    if not _mult(ec.n, key, ec).is_identity:
        raise InvalidPoint(f"not a valid public key: {key}")

    c = challenge_(msg_hash, ec, hf)  # 2, 3
    # second part delegated to helper function
    _assert_as_valid_(c, key, sig.r, sig.s, ec)


def assert_as_valid(
    msg: String, key: CurvePoint, sig: Sig, hf: HashF = sha256
) -> None:
    # Private function for test/dev purposes
    # It raises Errors, while verify should always return True or False
    msg_hash = reduce_to_hlen(msg, hf)
    assert_as_valid_(msg_hash, key, sig, hf)


def verify_(msg_hash: Octets, key: CurvePoint, sig: Sig, hf: HashF = sha256) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4)."""
    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid_(msg_hash, key, sig, hf)
    except Exception as e:  # pylint: disable=broad-except
        logger.debug("signature rejected: %s", e)
        return False

    return True


def verify(msg: String, key: CurvePoint, sig: Sig, hf: HashF = sha256) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4)."""
    msg_hash = reduce_to_hlen(msg, hf)
    return verify_(msg_hash, key, sig, hf)


def crack_prv_key_(
    msg_hash1: Octets,
    sig1: Sig,
    msg_hash2: Octets,
    sig2: Sig,
    hf: HashF = sha256,
) -> tuple[int, int]:
    """Return the (private key, nonce) of two signatures sharing the nonce.

    This is why an ephemeral key must never be reused.
    """
    sig1.assert_valid()
    sig2.assert_valid()

    ec = sig2.ec
    if sig1.ec != ec:
        raise ECDSAValueError("not the same curve in signatures")
    if sig1.r != sig2.r:
        raise ECDSAValueError("not the same r in signatures")
    if sig1.s == sig2.s:
        raise ECDSAValueError("identical signatures")

    c_1 = challenge_(msg_hash1, ec, hf)
    c_2 = challenge_(msg_hash2, ec, hf)

    nonce = (c_1 - c_2) * mod_inv(sig1.s - sig2.s, ec.n) % ec.n
    d = (sig2.s * nonce - c_2) * mod_inv(sig1.r, ec.n) % ec.n
    return d, nonce


def crack_prv_key(
    msg1: String,
    sig1: Sig,
    msg2: String,
    sig2: Sig,
    hf: HashF = sha256,
) -> tuple[int, int]:
    msg_hash1 = reduce_to_hlen(msg1, hf)
    msg_hash2 = reduce_to_hlen(msg2, hf)

    return crack_prv_key_(msg_hash1, sig1, msg_hash2, sig2, hf)
