#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Key provider backed by the pyca/cryptography package.

cryptography only knows named curves: domain parameters are mapped
to its curve classes by name, and keys with explicit parameters
are refused by the library DER loaders.
"""

import logging
from typing import Dict, Optional, Type

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from eckeycheck.alias import Octets, Point
from eckeycheck.config import DEFAULT_CURVE_NAME
from eckeycheck.curve import DomainParameters
from eckeycheck.curves import CURVES, get_named_curve
from eckeycheck.exceptions import ErrorKind, ProviderError
from eckeycheck.keys import KeyPair, PrivateKeyMaterial, PublicKeyMaterial
from eckeycheck.provider import KeyProvider
from eckeycheck.sec_point import bytes_from_point, point_from_octets
from eckeycheck.utils import bytes_from_octets

logger = logging.getLogger(__name__)

_CURVE_CLASSES: Dict[str, Type[ec.EllipticCurve]] = {
    "secp224r1": ec.SECP224R1,
    "secp256r1": ec.SECP256R1,
    "secp384r1": ec.SECP384R1,
    "secp521r1": ec.SECP521R1,
    "brainpoolP256r1": ec.BrainpoolP256R1,
}


def _curve_from_params(params: DomainParameters) -> ec.EllipticCurve:
    if params.name not in _CURVE_CLASSES:
        raise ProviderError(ErrorKind.UNSUPPORTED, f"unsupported curve: {params.name}")
    if CURVES.get(params.name) != params:
        err_msg = f"explicit parameters not matching {params.name} are unsupported"
        raise ProviderError(ErrorKind.UNSUPPORTED, err_msg)
    return _CURVE_CLASSES[params.name]()


def _params_from_curve(curve: ec.EllipticCurve) -> DomainParameters:
    if curve.name not in _CURVE_CLASSES:
        raise ProviderError(ErrorKind.UNSUPPORTED, f"unsupported curve: {curve.name}")
    return CURVES[curve.name]


def _public_material(key: ec.EllipticCurvePublicKey) -> PublicKeyMaterial:
    params = _params_from_curve(key.curve)
    octets = key.public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint,
    )
    # SEC 1 decoding checks the point against the curve tables
    try:
        W = point_from_octets(octets, params)
    except ValueError as e:
        raise ProviderError(ErrorKind.SPEC_INVALID, str(e)) from e
    return PublicKeyMaterial(params, W)


def _private_material(key: ec.EllipticCurvePrivateKey) -> PrivateKeyMaterial:
    s = key.private_numbers().private_value
    return PrivateKeyMaterial(_params_from_curve(key.curve), s)


class CryptographyProvider(KeyProvider):
    name = "cryptography"

    def __init__(self, default_curve: Optional[str] = DEFAULT_CURVE_NAME) -> None:
        # an empty name means no default curve at all
        self.default_curve = default_curve or None

    def generate_key_pair(self, params: Optional[DomainParameters] = None) -> KeyPair:
        if params is None:
            if self.default_curve is None:
                raise ProviderError(ErrorKind.UNSUPPORTED, "no default curve")
            params = get_named_curve(self.default_curve)
            logger.debug("using default curve %s", params.name)
        curve = _curve_from_params(params)
        try:
            key = ec.generate_private_key(curve)
        except UnsupportedAlgorithm as e:
            raise ProviderError(ErrorKind.UNSUPPORTED, str(e)) from e
        return KeyPair(_public_material(key.public_key()), _private_material(key))

    def _private_key(self, key_pair: KeyPair) -> ec.EllipticCurvePrivateKey:
        curve = _curve_from_params(key_pair.private.params)
        try:
            return ec.derive_private_key(key_pair.private.s, curve)
        except ValueError as e:
            raise ProviderError(ErrorKind.SPEC_INVALID, str(e)) from e

    def encode_public_key(self, key_pair: KeyPair) -> bytes:
        key = self._public_key(key_pair.public)
        return key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def encode_private_key(self, key_pair: KeyPair) -> bytes:
        return self._private_key(key_pair).private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

    def parse_public_key(self, encoded: Octets) -> PublicKeyMaterial:
        encoded = bytes_from_octets(encoded)
        try:
            key = serialization.load_der_public_key(encoded)
        except UnsupportedAlgorithm as e:
            raise ProviderError(ErrorKind.UNSUPPORTED, str(e)) from e
        except ValueError as e:
            raise ProviderError(ErrorKind.SPEC_INVALID, str(e)) from e
        if not isinstance(key, ec.EllipticCurvePublicKey):
            raise ProviderError(ErrorKind.SPEC_INVALID, "not an EC public key")
        return _public_material(key)

    def parse_private_key(self, encoded: Octets) -> PrivateKeyMaterial:
        encoded = bytes_from_octets(encoded)
        try:
            key = serialization.load_der_private_key(encoded, password=None)
        except UnsupportedAlgorithm as e:
            raise ProviderError(ErrorKind.UNSUPPORTED, str(e)) from e
        except (ValueError, TypeError) as e:
            raise ProviderError(ErrorKind.SPEC_INVALID, str(e)) from e
        if not isinstance(key, ec.EllipticCurvePrivateKey):
            raise ProviderError(ErrorKind.SPEC_INVALID, "not an EC private key")
        return _private_material(key)

    def _public_key(self, pub: PublicKeyMaterial) -> ec.EllipticCurvePublicKey:
        curve = _curve_from_params(pub.params)
        # the infinity point becomes the single 0x00 octet
        try:
            octets = bytes_from_point(pub.W, pub.params)
        except (ValueError, TypeError) as e:
            raise ProviderError(ErrorKind.SPEC_INVALID, str(e)) from e
        try:
            return ec.EllipticCurvePublicKey.from_encoded_point(curve, octets)
        except ValueError as e:
            raise ProviderError(ErrorKind.SPEC_INVALID, str(e)) from e

    def public_key_from_point(
        self, params: DomainParameters, Q: Point
    ) -> PublicKeyMaterial:
        key = self._public_key(PublicKeyMaterial(params, Q))
        return _public_material(key)
