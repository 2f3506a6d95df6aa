#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecclib.hashes` module."

from hashlib import sha1, sha256, sha512

from ecclib.hashes import reduce_to_hlen


def test_reduce_to_hlen() -> None:
    # FIPS 180-2 "abc" test vectors
    digest = reduce_to_hlen("abc")
    assert digest == bytes.fromhex(
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )
    assert reduce_to_hlen(b"abc") == digest
    assert reduce_to_hlen(b"abc", sha256) == digest

    digest = reduce_to_hlen(b"abc", sha1)
    assert digest.hex() == "a9993e364706816aba3e25717850c26c9cd0d89d"

    for hf in (sha1, sha256, sha512):
        assert len(reduce_to_hlen("Satoshi Nakamoto", hf)) == hf().digest_size
