#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecclib from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError and RuntimeError
from which the ecclib versions are derived.
"""


class ECDSAValueError(ValueError):
    pass


class ECDSARuntimeError(RuntimeError):
    pass


class NotInvertible(ECDSAValueError):
    """Zero (or a non-coprime residue) has no multiplicative inverse."""


class InvalidPoint(ECDSAValueError):
    """Coordinates do not satisfy the curve equation."""


class InvalidCurveParameters(ECDSAValueError):
    """Singular curve, non-prime field, or invalid generator/order."""


class RandomnessUnavailable(ECDSARuntimeError):
    """The randomness source could not supply entropy."""


class EphemeralGenerationExhausted(ECDSARuntimeError):
    """No usable ephemeral key was found within the retry cap."""


class InvalidSignature(ECDSARuntimeError):
    """Signature rejected at verification time."""
