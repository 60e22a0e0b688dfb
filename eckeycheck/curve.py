#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve domain parameters.

The domain parameters of a prime field elliptic curve
y^2 = x^3 + a*x + b over Fp, together with a generator G
of prime order n and the cofactor h.

This is not an elliptic curve arithmetic library:
point multiplication is never performed,
the only computation is the curve equation check
required to tell if a point belongs to the curve.
"""

from dataclasses import InitVar, dataclass, field
from typing import Any

from dataclasses_json import DataClassJsonMixin, config

from eckeycheck.alias import Point
from eckeycheck.config import MAX_COFACTOR
from eckeycheck.exceptions import ECKeyCheckTypeError, ECKeyCheckValueError
from eckeycheck.utils import hex_string, int_from_integer, int_repr


def _int_field() -> Any:
    return field(metadata=config(encoder=hex, decoder=int_from_integer))


def _point_decoder(v: Any) -> Point:
    if len(v) != 2:
        raise ECKeyCheckValueError("point must be a sequence[int, int]")
    return int_from_integer(v[0]), int_from_integer(v[1])


@dataclass(frozen=True)
class DomainParameters(DataClassJsonMixin):
    name: str
    p: int = _int_field()
    a: int = _int_field()
    b: int = _int_field()
    G: Point = field(
        metadata=config(
            encoder=lambda v: [hex(v[0]), hex(v[1])], decoder=_point_decoder
        )
    )
    n: int = _int_field()
    h: int = 1
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1,
        # but for the expensive n*G = INF check

        # 1. check that p is an odd prime
        # Fermat test will do as _probabilistic_ primality test...
        if self.p < 3 or self.p % 2 == 0 or pow(2, self.p - 1, self.p) != 1:
            raise ECKeyCheckValueError(f"p is not prime: {int_repr(self.p)}")

        # 2. check that a and b are integers in the interval [0, p-1]
        if not 0 <= self.a < self.p:
            raise ECKeyCheckValueError(f"a not in 0..p-1: {int_repr(self.a)}")
        if not 0 <= self.b < self.p:
            raise ECKeyCheckValueError(f"b not in 0..p-1: {int_repr(self.b)}")

        # 3. check that 4*a^3 + 27*b^2 != 0 (mod p)
        if (4 * self.a * self.a * self.a + 27 * self.b * self.b) % self.p == 0:
            raise ECKeyCheckValueError("zero discriminant")

        # 4. check that G is a curve point, but not INF
        if len(self.G) != 2:
            raise ECKeyCheckValueError("Generator must a be a sequence[int, int]")
        if self.G[1] == 0:
            raise ECKeyCheckValueError("INF point cannot be a generator")
        if not self.is_on_curve(self.G):
            raise ECKeyCheckValueError("Generator is not on the curve")

        # 5. order must be a positive (probable) prime
        if self.n <= 0:
            raise ECKeyCheckValueError(f"non-positive order n: {int_repr(self.n)}")
        if self.n < 3 or pow(2, self.n - 1, self.n) != 1:
            raise ECKeyCheckValueError(f"n is not prime: {int_repr(self.n)}")

        # 6. cofactor must be a small positive integer
        if not 0 < self.h <= MAX_COFACTOR:
            raise ECKeyCheckValueError(f"invalid h: {int_repr(self.h)}")

        # 7. Hasse theorem: |h*n - (p+1)| <= 2*sqrt(p)
        t = self.h * self.n - self.p - 1
        if t * t > 4 * self.p:
            err_msg = "h*n not in p+1-2*sqrt(p)..p+1+2*sqrt(p): "
            err_msg += f"{int_repr(self.h * self.n)}"
            raise ECKeyCheckValueError(err_msg)

    @property
    def field_size(self) -> int:
        "Return the bit length of the field prime."
        return self.p.bit_length()

    @property
    def psize(self) -> int:
        "Return the byte length of the field prime."
        return (self.p.bit_length() + 7) // 8

    @property
    def nlen(self) -> int:
        "Return the bit length of the group order."
        return self.n.bit_length()

    @property
    def curve(self) -> Point:
        "Return the (a, b) curve coefficients."
        return self.a, self.b

    def is_on_curve(self, Q: Point) -> bool:
        "Return True if the point is on the curve."
        if not isinstance(Q, tuple) or len(Q) != 2:
            raise ECKeyCheckTypeError("point must be a tuple[int, int]")
        if Q[1] == 0:  # Infinity point in affine coordinates
            return True
        if not 0 < Q[1] < self.p:  # y cannot be zero
            raise ECKeyCheckValueError(f"y-coordinate not in 1..p-1: {int_repr(Q[1])}")
        if not 0 <= Q[0] < self.p:
            raise ECKeyCheckValueError(f"x-coordinate not in 0..p-1: {int_repr(Q[0])}")
        y2 = (Q[0] * Q[0] * Q[0] + self.a * Q[0] + self.b) % self.p
        return Q[1] * Q[1] % self.p == y2

    def require_on_curve(self, Q: Point) -> None:
        "Require the input curve point to be on the curve."
        if not self.is_on_curve(Q):
            raise ECKeyCheckValueError("point not on curve")

    def __str__(self) -> str:
        result = f"Curve {self.name}"
        result += f"\n field size = {self.field_size}"
        result += f"\n p   = {hex_string(self.p)}"
        result += f"\n a   = {hex_string(self.a)}"
        result += f"\n b   = {hex_string(self.b)}"
        result += f"\n x_G = {hex_string(self.G[0])}"
        result += f"\n y_G = {hex_string(self.G[1])}"
        result += f"\n n   = {hex_string(self.n)}"
        result += f"\n h   = {self.h}"
        return result
