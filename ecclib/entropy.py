#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Default source of randomness for private and ephemeral keys.

Any callable rng(lower, upper) returning an integer uniformly
distributed in [lower, upper) can replace random_scalar:
see ecclib.alias.RandomScalarF.

The secrets module draws from the operating system CSPRNG;
it is safe to call from multiple threads.
"""

import secrets

from ecclib.exceptions import ECDSAValueError, RandomnessUnavailable


def random_scalar(lower: int, upper: int) -> int:
    """Return a cryptographically secure random int in [lower, upper).

    RandomnessUnavailable is raised if
    the operating system cannot supply entropy.
    """

    if upper <= lower:
        raise ECDSAValueError(f"empty range: [{lower}, {upper})")
    try:
        return lower + secrets.randbelow(upper - lower)
    except (OSError, NotImplementedError) as e:
        raise RandomnessUnavailable("entropy source not available") from e
