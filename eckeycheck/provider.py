#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Key provider interface.

A key provider is the cryptographic implementation under test:
it generates EC key pairs, encodes them
(X.509 SubjectPublicKeyInfo and PKCS#8, both DER),
and parses encoded keys back.

Every refusal must be raised as ProviderError with an explicit ErrorKind,
so that the checks can tell a rejected key specification (SPEC_INVALID)
from an algorithm or curve the provider does not have (UNSUPPORTED).
"""

from abc import ABC, abstractmethod
from typing import Optional

from eckeycheck.alias import Octets, Point
from eckeycheck.curve import DomainParameters
from eckeycheck.exceptions import ECKeyCheckValueError
from eckeycheck.keys import KeyPair, PrivateKeyMaterial, PublicKeyMaterial


class KeyProvider(ABC):
    name = "abstract"

    @abstractmethod
    def generate_key_pair(self, params: Optional[DomainParameters] = None) -> KeyPair:
        """Return a fresh key pair.

        Without parameters the provider must fall back to its own defaults,
        or raise ProviderError(ErrorKind.UNSUPPORTED).
        """

    @abstractmethod
    def encode_public_key(self, key_pair: KeyPair) -> bytes:
        "Return the SubjectPublicKeyInfo DER encoding of the public key."

    @abstractmethod
    def encode_private_key(self, key_pair: KeyPair) -> bytes:
        "Return the PKCS#8 DER encoding of the private key."

    @abstractmethod
    def parse_public_key(self, encoded: Octets) -> PublicKeyMaterial:
        "Parse a SubjectPublicKeyInfo DER encoding."

    @abstractmethod
    def parse_private_key(self, encoded: Octets) -> PrivateKeyMaterial:
        "Parse a PKCS#8 DER encoding."

    @abstractmethod
    def public_key_from_point(
        self, params: DomainParameters, Q: Point
    ) -> PublicKeyMaterial:
        "Build a public key specification from domain parameters and a point."

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


def check_public_key(pub: PublicKeyMaterial) -> None:
    """Require the public key point to be a valid curve point.

    The point must be on the curve of the key domain parameters
    and must not be the infinity point.
    Whether the point belongs to the subgroup generated by G
    is not checked: it would require a point multiplication.
    """

    if len(pub.W) != 2:
        raise ECKeyCheckValueError("public point must be a sequence[int, int]")
    if pub.W[1] == 0:
        raise ECKeyCheckValueError("public point is the infinity point")
    try:
        on_curve = pub.params.is_on_curve(pub.W)
    except ValueError as e:
        raise ECKeyCheckValueError(f"invalid public point: {e}") from e
    if not on_curve:
        raise ECKeyCheckValueError(f"public point not on curve {pub.params.name}")
