#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Shared fixtures: a scriptable in-memory key provider."

from dataclasses import replace
from typing import Optional, Set

import pytest

from eckeycheck.alias import Octets, Point
from eckeycheck.curve import DomainParameters
from eckeycheck.curves import CURVES, secp256r1
from eckeycheck.exceptions import ErrorKind, ProviderError
from eckeycheck.keys import KeyPair, PrivateKeyMaterial, PublicKeyMaterial
from eckeycheck.provider import KeyProvider
from eckeycheck.utils import bytes_from_octets


class FakeProvider(KeyProvider):
    """In-memory key provider, misbehaving on demand.

    Generated key pairs are (n-1, -G): a valid key pair,
    without any need for point multiplication.
    Keys are 'encoded' as colon separated text.
    """

    name = "fake"

    def __init__(self) -> None:
        self.default_params: Optional[DomainParameters] = secp256r1
        self.unsupported: Set[str] = set()
        # how DER public keys are refused, None to accept them
        self.parse_error: Optional[ErrorKind] = ErrorKind.SPEC_INVALID
        # how the infinity point is refused, None to accept it
        self.point_error: Optional[ErrorKind] = ErrorKind.SPEC_INVALID
        self.scalar: Optional[int] = None
        self.public_point: Optional[Point] = None
        self.parse_own_error: Optional[ErrorKind] = None
        self.decoded_params: Optional[DomainParameters] = None
        self.decoded_scalar_delta = 0

    def generate_key_pair(self, params: Optional[DomainParameters] = None) -> KeyPair:
        if params is None:
            if self.default_params is None:
                raise ProviderError(ErrorKind.UNSUPPORTED, "no default curve")
            params = self.default_params
        if params.name in self.unsupported:
            raise ProviderError(ErrorKind.UNSUPPORTED, f"unsupported: {params.name}")
        s = params.n - 1 if self.scalar is None else self.scalar
        W = self.public_point or (params.G[0], params.p - params.G[1])
        return KeyPair(PublicKeyMaterial(params, W), PrivateKeyMaterial(params, s))

    def encode_public_key(self, key_pair: KeyPair) -> bytes:
        x, y = key_pair.public.W
        return f"pub:{key_pair.params.name}:{x}:{y}".encode()

    def encode_private_key(self, key_pair: KeyPair) -> bytes:
        return f"prv:{key_pair.params.name}:{key_pair.private.s}".encode()

    def _decode(self, encoded: Octets, tag: str) -> list:
        if self.parse_own_error is not None:
            raise ProviderError(self.parse_own_error, "cannot parse")
        fields = bytes_from_octets(encoded).decode().split(":")
        if fields[0] != tag:
            raise ProviderError(ErrorKind.PARSE_ERROR, f"not a {tag} key")
        return fields

    def parse_public_key(self, encoded: Octets) -> PublicKeyMaterial:
        encoded = bytes_from_octets(encoded)
        if encoded[:1] == b"\x30":  # DER sequence
            if self.parse_error is not None:
                raise ProviderError(self.parse_error, "invalid parameters")
            return PublicKeyMaterial(secp256r1, secp256r1.G)
        _, ec_name, x, y = self._decode(encoded, "pub")
        params = self.decoded_params or CURVES[ec_name]
        return PublicKeyMaterial(params, (int(x), int(y)))

    def parse_private_key(self, encoded: Octets) -> PrivateKeyMaterial:
        _, ec_name, s = self._decode(encoded, "prv")
        params = self.decoded_params or CURVES[ec_name]
        return PrivateKeyMaterial(params, int(s) + self.decoded_scalar_delta)

    def public_key_from_point(
        self, params: DomainParameters, Q: Point
    ) -> PublicKeyMaterial:
        if params.name in self.unsupported:
            raise ProviderError(ErrorKind.UNSUPPORTED, f"unsupported: {params.name}")
        if Q[1] == 0 and self.point_error is not None:
            raise ProviderError(self.point_error, "infinity point")
        return PublicKeyMaterial(params, Q)


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def toy_curve() -> DomainParameters:
    # y^2 = x^3 + 2 over F13, 19 points
    return DomainParameters("ec13_19", 13, 0, 2, (1, 9), 19, 1)


@pytest.fixture
def other_curve() -> DomainParameters:
    # brainpoolP256r1 values under the secp256r1 name
    return replace(CURVES["brainpoolP256r1"], name="secp256r1")
