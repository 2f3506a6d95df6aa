#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
#
# use ecclib.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for message digests
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# this is for string that can be
# converted to bytes using encode()
# e.g. a message to be signed
#    if isinstance(msg, str):
#        msg = msg.encode()
String = Union[bytes, str]

# hex-string or bytes representation of an int
# Integer = Union[Octets, int]
Integer = Union[bytes, str, int]

# Hash digest constructor: a zero-argument callable such as hashlib.sha256,
# returning an object with update() and digest()
HashF = Callable[[], Any]

# Randomness source: rng(lower, upper) returns an int
# uniformly distributed in [lower, upper)
RandomScalarF = Callable[[int, int], int]
