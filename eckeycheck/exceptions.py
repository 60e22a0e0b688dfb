#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The ECKeyCheck* classes are only meant to dicriminate between Exceptions
being raised by eckeycheck from those raised by other codebase.
Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the eckeycheck versions are derived.

ProviderError is what a key provider adapter raises:
it does not rely on the exception class to tell an invalid key
specification from an unsupported algorithm,
but carries an explicit ErrorKind instead.

CheckFailure and its subclasses are hard failures of a check.
They derive from AssertionError so that test runners
report them as failures, not as errors.
"""

from enum import Enum


class ECKeyCheckValueError(ValueError):
    pass


class ECKeyCheckTypeError(TypeError):
    pass


class ECKeyCheckRuntimeError(RuntimeError):
    pass


class ErrorKind(Enum):
    """Why a key provider refused a request.

    PARSE_ERROR is only raised by adapters whose library tells
    undecodable bytes from decodable but invalid key data.
    CryptographyProvider never raises it: the cryptography DER loaders
    raise ValueError in both cases, which is reported as SPEC_INVALID.
    """

    # the key specification is malformed or has out-of-range values
    SPEC_INVALID = "spec_invalid"
    # the algorithm or the curve is not available in the provider
    UNSUPPORTED = "unsupported"
    # the input could not be decoded at all
    PARSE_ERROR = "parse_error"
    INTERNAL = "internal"


class ProviderError(ECKeyCheckRuntimeError):
    def __init__(self, kind: ErrorKind, msg: str = "") -> None:
        self.kind = kind
        super().__init__(f"{kind.value}: {msg}" if msg else kind.value)


class CheckFailure(AssertionError):
    pass


class UnexpectedAcceptance(CheckFailure):
    "The provider parsed an encoding that must be rejected."

    def __init__(self, msg: str, encoded: str = "") -> None:
        self.encoded = encoded
        super().__init__(msg)


class CodecSelfInconsistency(CheckFailure):
    "The provider cannot parse its own encoding, or fields do not round-trip."


class WeaknessDetected(CheckFailure):
    "A generated or constructed key violates a strength or structural invariant."
