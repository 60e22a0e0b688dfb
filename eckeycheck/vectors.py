#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Encodings of EC public keys with invalid domain parameters.

There are multiple places where a provider can validate a public key:
some parameters are typically validated when the key is parsed,
more validation can be done by the cryptographic primitive using the key.
Unused parameters are sometimes not validated at all.

The following encodings are X.509 SubjectPublicKeyInfo structures
(RFC 3279, section 2.3.5) with explicit secp256r1 domain parameters,
each one with a single altered field.
A parser is expected to perform at least these minimal validations:
the order is a positive integer, the cofactor is a small positive integer.

Other alterations (e.g. a wrong order for the generator) are expensive
to detect and may go unnoticed by the parser:
they must be caught by the primitives using the key,
e.g. ECDH must not trust the order claimed in the public key.
"""

from dataclasses import dataclass
from typing import Tuple

from eckeycheck.utils import bytes_from_octets, int_repr


@dataclass(frozen=True)
class MalformedPublicKey:
    # either "order" or "cofactor"
    altered_field: str
    altered_value: int
    # DER encoding, hex-string
    encoded: str
    ec_name: str = "secp256r1"

    @property
    def octets(self) -> bytes:
        return bytes_from_octets(self.encoded)

    @property
    def description(self) -> str:
        value = int_repr(self.altered_value)
        return f"{self.ec_name} with {self.altered_field} = {value}"


EC_INVALID_PUBLIC_KEYS: Tuple[MalformedPublicKey, ...] = (
    # order = -n, a negative order
    MalformedPublicKey(
        "order",
        -0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551,
        "308201333081ec06072a8648ce3d02013081e0020101302c06072a8648ce3d01"
        "01022100ffffffff00000001000000000000000000000000ffffffffffffffff"
        "ffffffff30440420ffffffff00000001000000000000000000000000ffffffff"
        "fffffffffffffffc04205ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53"
        "b0f63bce3c3e27d2604b0441046b17d1f2e12c4247f8bce6e563a440f277037d"
        "812deb33a0f4a13945d898c2964fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33"
        "576b315ececbb6406837bf51f50221ff00000000ffffffff0000000000000000"
        "4319055258e8617b0c46353d039cdaaf02010103420004cdeb39edd03e2b1a11"
        "a5e134ec99d5f25f21673d403f3ecb47bd1fa676638958ea58493b8429598c0b"
        "49bbb85c3303ddb1553c3b761c2caacca71606ba9ebac8",
    ),
    # order = 0
    MalformedPublicKey(
        "order",
        0,
        "308201123081cb06072a8648ce3d02013081bf020101302c06072a8648ce3d01"
        "01022100ffffffff00000001000000000000000000000000ffffffffffffffff"
        "ffffffff30440420ffffffff00000001000000000000000000000000ffffffff"
        "fffffffffffffffc04205ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53"
        "b0f63bce3c3e27d2604b0441046b17d1f2e12c4247f8bce6e563a440f277037d"
        "812deb33a0f4a13945d898c2964fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33"
        "576b315ececbb6406837bf51f5020002010103420004cdeb39edd03e2b1a11a5"
        "e134ec99d5f25f21673d403f3ecb47bd1fa676638958ea58493b8429598c0b49"
        "bbb85c3303ddb1553c3b761c2caacca71606ba9ebac8",
    ),
    # cofactor = -1
    MalformedPublicKey(
        "cofactor",
        -1,
        "308201333081ec06072a8648ce3d02013081e0020101302c06072a8648ce3d01"
        "01022100ffffffff00000001000000000000000000000000ffffffffffffffff"
        "ffffffff30440420ffffffff00000001000000000000000000000000ffffffff"
        "fffffffffffffffc04205ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53"
        "b0f63bce3c3e27d2604b0441046b17d1f2e12c4247f8bce6e563a440f277037d"
        "812deb33a0f4a13945d898c2964fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33"
        "576b315ececbb6406837bf51f5022100ffffffff00000000ffffffffffffffff"
        "bce6faada7179e84f3b9cac2fc6325510201ff03420004cdeb39edd03e2b1a11"
        "a5e134ec99d5f25f21673d403f3ecb47bd1fa676638958ea58493b8429598c0b"
        "49bbb85c3303ddb1553c3b761c2caacca71606ba9ebac8",
    ),
    # cofactor = 0
    MalformedPublicKey(
        "cofactor",
        0,
        "308201323081eb06072a8648ce3d02013081df020101302c06072a8648ce3d01"
        "01022100ffffffff00000001000000000000000000000000ffffffffffffffff"
        "ffffffff30440420ffffffff00000001000000000000000000000000ffffffff"
        "fffffffffffffffc04205ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53"
        "b0f63bce3c3e27d2604b0441046b17d1f2e12c4247f8bce6e563a440f277037d"
        "812deb33a0f4a13945d898c2964fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33"
        "576b315ececbb6406837bf51f5022100ffffffff00000000ffffffffffffffff"
        "bce6faada7179e84f3b9cac2fc632551020003420004cdeb39edd03e2b1a11a5"
        "e134ec99d5f25f21673d403f3ecb47bd1fa676638958ea58493b8429598c0b49"
        "bbb85c3303ddb1553c3b761c2caacca71606ba9ebac8",
    ),
    # cofactor = n, the group order itself
    MalformedPublicKey(
        "cofactor",
        0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551,
        "308201553082010d06072a8648ce3d020130820100020101302c06072a8648ce"
        "3d0101022100ffffffff00000001000000000000000000000000ffffffffffff"
        "ffffffffffff30440420ffffffff00000001000000000000000000000000ffff"
        "fffffffffffffffffffc04205ac635d8aa3a93e7b3ebbd55769886bc651d06b0"
        "cc53b0f63bce3c3e27d2604b0441046b17d1f2e12c4247f8bce6e563a440f277"
        "037d812deb33a0f4a13945d898c2964fe342e2fe1a7f9b8ee7eb4a7c0f9e162b"
        "ce33576b315ececbb6406837bf51f5022100ffffffff00000000ffffffffffff"
        "ffffbce6faada7179e84f3b9cac2fc632551022100ffffffff00000000ffffff"
        "ffffffffffbce6faada7179e84f3b9cac2fc63255103420004cdeb39edd03e2b"
        "1a11a5e134ec99d5f25f21673d403f3ecb47bd1fa676638958ea58493b842959"
        "8c0b49bbb85c3303ddb1553c3b761c2caacca71606ba9ebac8",
    ),
)
