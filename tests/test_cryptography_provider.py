#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `eckeycheck.cryptography_provider` module."

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from eckeycheck.alias import INF
from eckeycheck.checks import (
    Outcome,
    check_default_key_generation,
    check_key_generation,
    check_malformed_public_keys,
    check_private_key_round_trip,
    check_public_key_at_infinity,
    check_public_key_round_trip,
)
from eckeycheck.config import KEYGEN_CURVE_NAMES
from eckeycheck.cryptography_provider import CryptographyProvider
from eckeycheck.curves import get_named_curve, prime239v1, secp256r1
from eckeycheck.exceptions import ErrorKind, ProviderError
from eckeycheck.vectors import EC_INVALID_PUBLIC_KEYS


@pytest.fixture
def crypto_provider() -> CryptographyProvider:
    return CryptographyProvider("secp256r1")


def test_malformed_public_keys(crypto_provider) -> None:

    assert check_malformed_public_keys(crypto_provider) == Outcome.PASSED

    # explicit parameters are refused by the DER loader as invalid
    for vector in EC_INVALID_PUBLIC_KEYS:
        with pytest.raises(ProviderError) as excinfo:
            crypto_provider.parse_public_key(vector.encoded)
        assert excinfo.value.kind is ErrorKind.SPEC_INVALID, vector.description


def test_round_trips(crypto_provider) -> None:

    assert check_private_key_round_trip(crypto_provider) == Outcome.PASSED
    assert check_public_key_round_trip(crypto_provider) == Outcome.PASSED


@pytest.mark.parametrize("ec_name", KEYGEN_CURVE_NAMES)
def test_key_generation(crypto_provider, ec_name) -> None:

    params = get_named_curve(ec_name)
    outcome = check_key_generation(crypto_provider, params)
    assert outcome in (Outcome.PASSED, Outcome.SKIPPED)


def test_key_generation_known_outcomes(crypto_provider) -> None:

    assert check_key_generation(crypto_provider, secp256r1) == Outcome.PASSED
    # no X9.62 prime239v1 in cryptography
    assert check_key_generation(crypto_provider, prime239v1) == Outcome.SKIPPED


def test_default_key_generation(crypto_provider) -> None:

    assert check_default_key_generation(crypto_provider) == Outcome.PASSED
    key_pair = crypto_provider.generate_key_pair()
    assert key_pair.params is secp256r1

    assert check_default_key_generation(CryptographyProvider("")) == Outcome.SKIPPED
    assert check_default_key_generation(CryptographyProvider(None)) == Outcome.SKIPPED


def test_public_key_at_infinity(crypto_provider) -> None:

    assert check_public_key_at_infinity(crypto_provider) == Outcome.PASSED

    with pytest.raises(ProviderError) as excinfo:
        crypto_provider.public_key_from_point(secp256r1, INF)
    assert excinfo.value.kind is ErrorKind.SPEC_INVALID


def test_public_key_from_point(crypto_provider) -> None:

    ec = secp256r1
    pub = crypto_provider.public_key_from_point(ec, ec.G)
    assert pub.W == ec.G
    assert pub.params is ec

    with pytest.raises(ProviderError, match="spec_invalid: point not on curve"):
        crypto_provider.public_key_from_point(ec, (ec.G[0], ec.G[1] + 1))

    with pytest.raises(ProviderError, match="unsupported: unsupported curve"):
        crypto_provider.public_key_from_point(prime239v1, prime239v1.G)


def test_parse_errors(crypto_provider, other_curve) -> None:

    # undecodable input is an invalid key specification too
    truncated = EC_INVALID_PUBLIC_KEYS[0].octets[:-10]
    for garbage in (b"\x00\x01", "30 03 02 01 01", truncated):
        with pytest.raises(ProviderError) as excinfo:
            crypto_provider.parse_public_key(garbage)
        assert excinfo.value.kind is ErrorKind.SPEC_INVALID
        with pytest.raises(ProviderError) as excinfo:
            crypto_provider.parse_private_key(garbage)
        assert excinfo.value.kind is ErrorKind.SPEC_INVALID

    rsa_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    rsa_spki = rsa_key.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    with pytest.raises(ProviderError, match="spec_invalid: not an EC public key"):
        crypto_provider.parse_public_key(rsa_spki)

    # same name, different parameters
    with pytest.raises(ProviderError, match="unsupported: explicit parameters"):
        crypto_provider.generate_key_pair(other_curve)


def test_encodings(crypto_provider) -> None:

    key_pair = crypto_provider.generate_key_pair(secp256r1)

    pub_der = crypto_provider.encode_public_key(key_pair)
    assert pub_der[0] == 0x30
    assert crypto_provider.parse_public_key(pub_der) == key_pair.public
    assert crypto_provider.parse_public_key(pub_der.hex()) == key_pair.public

    prv_der = crypto_provider.encode_private_key(key_pair)
    assert prv_der[0] == 0x30
    assert crypto_provider.parse_private_key(prv_der) == key_pair.private


def test_public_point_decoding(crypto_provider) -> None:

    curves = {
        "secp224r1": ec.SECP224R1(),
        "secp256r1": ec.SECP256R1(),
        "secp384r1": ec.SECP384R1(),
        "secp521r1": ec.SECP521R1(),
    }
    for ec_name, curve in curves.items():
        key_pair = crypto_provider.generate_key_pair(get_named_curve(ec_name))
        # public point as computed by the library itself
        key = ec.derive_private_key(key_pair.private.s, curve)
        numbers = key.public_key().public_numbers()
        assert key_pair.public.W == (numbers.x, numbers.y)
        assert key_pair.params.is_on_curve(key_pair.public.W)
