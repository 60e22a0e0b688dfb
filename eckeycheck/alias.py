#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "3059301306072a8648ce3d020106082a8648ce3d03010703420004..."
# "04 6b17d1f2 e12c4247 ..."
#
# use eckeycheck.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for DER encoded keys (SubjectPublicKeyInfo, PKCS#8)
# and for SEC 1 encoded points
Octets = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# Elliptic curve point in affine coordinates.
Point = Tuple[int, int]

# Note that the infinity point in affine coordinates is INF = (int, 0)
# (no affine point has y=0 coordinate in a group of prime order).
# It can be checked with 'INF[1] == 0'
# The x-coordinate is arbitrary: 5 is preferred
# because it is not a valid x-coordinate in any of the catalogued curves
INF = 5, 0
