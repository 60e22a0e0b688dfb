#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Checks of the EC key handling of a key provider.

Each check returns Outcome.PASSED,
or Outcome.SKIPPED if the provider does not support
the requested algorithm or curve:
an unsupported curve is a legitimate provider configuration, not a defect.

A hard failure raises a CheckFailure subclass:

* UnexpectedAcceptance: a malformed encoding has been parsed
* CodecSelfInconsistency: the provider cannot parse its own encoding,
  or the parsed fields do not match the generated ones
* WeaknessDetected: a generated (or constructed) key violates
  a strength or structural invariant

Checks are one-shot and independent: no state is shared among them
but the read-only curve and test vector tables.
"""

import logging
from enum import Enum
from typing import Iterable, Optional

from eckeycheck.alias import INF
from eckeycheck.config import (
    MIN_DEFAULT_FIELD_SIZE,
    ORDER_SLACK_BITS,
    REFERENCE_CURVE_NAME,
)
from eckeycheck.curve import DomainParameters
from eckeycheck.curves import get_named_curve
from eckeycheck.exceptions import (
    CodecSelfInconsistency,
    ErrorKind,
    ProviderError,
    UnexpectedAcceptance,
    WeaknessDetected,
)
from eckeycheck.keys import KeyPair
from eckeycheck.provider import KeyProvider, check_public_key
from eckeycheck.utils import int_repr
from eckeycheck.vectors import EC_INVALID_PUBLIC_KEYS, MalformedPublicKey

logger = logging.getLogger(__name__)


class Outcome(Enum):
    PASSED = "passed"
    SKIPPED = "skipped"
    FAILED = "failed"
    ERROR = "error"


# refusals accepted as a rejection of a malformed encoding
_REJECTIONS = (ErrorKind.SPEC_INVALID, ErrorKind.PARSE_ERROR)


def _skip(check: str, reason: object) -> Outcome:
    logger.warning("%s skipped: %s", check, reason)
    return Outcome.SKIPPED


def _generate(
    provider: KeyProvider, params: Optional[DomainParameters]
) -> Optional[KeyPair]:
    "Return a key pair, None if the provider does not support the parameters."
    try:
        return provider.generate_key_pair(params)
    except ProviderError as e:
        if e.kind is ErrorKind.UNSUPPORTED:
            return None
        raise


def check_malformed_public_keys(
    provider: KeyProvider,
    vectors: Iterable[MalformedPublicKey] = EC_INVALID_PUBLIC_KEYS,
) -> Outcome:
    """Require the provider to reject every malformed public key encoding.

    An invalid key specification is the expected rejection.
    Parse errors are rejections too, even if less specific ones:
    they are accepted but logged as warnings.
    If explicit parameters are unsupported the check is skipped,
    but only after every encoding has been tried:
    an accepted encoding is a failure anyway.
    Any other exception propagates.
    """

    check = "malformed public keys"
    unsupported = 0
    for vector in vectors:
        try:
            pub = provider.parse_public_key(vector.octets)
        except ProviderError as e:
            if e.kind is ErrorKind.UNSUPPORTED:
                logger.warning("%s unsupported: %s", vector.description, e)
                unsupported += 1
                continue
            if e.kind not in _REJECTIONS:
                raise
            if e.kind is ErrorKind.SPEC_INVALID:
                logger.info("%s rejected: %s", vector.description, e)
            else:
                kind = e.kind.value
                logger.warning("%s rejected as %s: %s", vector.description, kind, e)
            continue
        err_msg = f"{provider.name} constructed invalid public key"
        err_msg += f" ({vector.description}) on curve {pub.params.name}"
        err_msg += f" from: {vector.encoded}"
        raise UnexpectedAcceptance(err_msg, vector.encoded)
    if unsupported:
        return _skip(check, f"{provider.name} cannot parse {unsupported} encodings")
    return Outcome.PASSED


def check_private_key_round_trip(
    provider: KeyProvider, params: Optional[DomainParameters] = None
) -> Outcome:
    """Require the provider to parse its own PKCS#8 private key encoding.

    Scalar, cofactor, curve, generator, and order must be preserved.
    """

    check = "private key round trip"
    params = params or get_named_curve(REFERENCE_CURVE_NAME)
    key_pair = _generate(provider, params)
    if key_pair is None:
        return _skip(check, f"{provider.name} cannot generate {params.name} keys")

    priv = key_pair.private
    encoded = provider.encode_private_key(key_pair)
    logger.info("encoded %s private key: %s", params.name, encoded.hex())
    try:
        decoded = provider.parse_private_key(encoded)
    except ProviderError as e:
        err_msg = f"{provider.name} cannot parse its own encoding: {e}"
        raise CodecSelfInconsistency(err_msg) from e

    dec = decoded.params
    fields = (
        ("scalar", priv.s, decoded.s),
        ("cofactor", priv.params.h, dec.h),
        ("curve", (priv.params.p, priv.params.curve), (dec.p, dec.curve)),
        ("generator", priv.params.G, dec.G),
        ("order", priv.params.n, dec.n),
    )
    for field_name, expected, actual in fields:
        if expected != actual:
            err_msg = f"{field_name} mismatch after round trip: "
            err_msg += f"{actual!r} instead of {expected!r}"
            raise CodecSelfInconsistency(err_msg)
    return Outcome.PASSED


def check_public_key_round_trip(
    provider: KeyProvider, params: Optional[DomainParameters] = None
) -> Outcome:
    "Require the provider to parse its own SubjectPublicKeyInfo encoding."

    check = "public key round trip"
    params = params or get_named_curve(REFERENCE_CURVE_NAME)
    key_pair = _generate(provider, params)
    if key_pair is None:
        return _skip(check, f"{provider.name} cannot generate {params.name} keys")

    pub = key_pair.public
    encoded = provider.encode_public_key(key_pair)
    logger.debug("encoded %s public key: %s", params.name, encoded.hex())
    try:
        decoded = provider.parse_public_key(encoded)
    except ProviderError as e:
        err_msg = f"{provider.name} cannot parse its own encoding: {e}"
        raise CodecSelfInconsistency(err_msg) from e

    if decoded.W != pub.W:
        raise CodecSelfInconsistency(f"point mismatch after round trip: {decoded.W}")
    for field_name in ("p", "a", "b", "G", "n", "h"):
        if getattr(decoded.params, field_name) != getattr(pub.params, field_name):
            raise CodecSelfInconsistency(f"{field_name} mismatch after round trip")
    return Outcome.PASSED


def check_key_generation(provider: KeyProvider, params: DomainParameters) -> Outcome:
    """Check a key pair generated for the given domain parameters.

    The public point must be a valid curve point, not the infinity point.
    The private scalar must be in [1, n-1] and its bit length must be
    within ORDER_SLACK_BITS bits of the order bit length:
    a correct uniform sampling fails this with probability 2^-32.
    """

    check = f"{params.name} key generation"
    key_pair = _generate(provider, params)
    if key_pair is None:
        return _skip(check, f"{provider.name} cannot generate {params.name} keys")

    try:
        check_public_key(key_pair.public)
    except (ValueError, TypeError) as e:
        raise WeaknessDetected(f"{check}: {e}") from e

    s = key_pair.private.s
    if not 0 < s < params.n:
        raise WeaknessDetected(f"{check}: private scalar not in 1..n-1: {int_repr(s)}")
    min_len = params.nlen - ORDER_SLACK_BITS
    if s.bit_length() < min_len:
        err_msg = f"{check}: private scalar too short: "
        err_msg += f"{s.bit_length()} bits instead of at least {min_len}"
        raise WeaknessDetected(err_msg)
    return Outcome.PASSED


def check_default_key_generation(provider: KeyProvider) -> Outcome:
    """Check the curve used by a key pair generator without parameters.

    The requirement is low: at least a 224-bit curve.
    Defaults are better avoided altogether,
    since they are difficult to change and easily become outdated.
    """

    check = "default key generation"
    key_pair = _generate(provider, None)
    if key_pair is None:
        return _skip(check, f"{provider.name} has no default parameters")

    params = key_pair.params
    logger.info("default parameters for EC key generation:\n%s", params)
    if params.field_size < MIN_DEFAULT_FIELD_SIZE:
        err_msg = f"expected a default key size of at least {MIN_DEFAULT_FIELD_SIZE}"
        err_msg += f" bits, generated key size is {params.field_size}"
        raise WeaknessDetected(err_msg)
    return Outcome.PASSED


def check_public_key_at_infinity(
    provider: KeyProvider, params: Optional[DomainParameters] = None
) -> Outcome:
    """Require the provider to refuse the infinity point as public key.

    Accepting it would enable subgroup confinement attacks.
    """

    check = "public key at infinity"
    params = params or get_named_curve(REFERENCE_CURVE_NAME)
    try:
        pub = provider.public_key_from_point(params, INF)
    except ProviderError as e:
        if e.kind is ErrorKind.UNSUPPORTED:
            return _skip(check, e)
        if e.kind not in _REJECTIONS:
            raise
        logger.info("infinity point rejected: %s", e)
        return Outcome.PASSED
    err_msg = f"infinity point accepted as {params.name} public key: {pub.W}"
    raise WeaknessDetected(err_msg)
