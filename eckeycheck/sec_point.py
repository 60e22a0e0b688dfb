#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC uncompressed point representation.

SEC 1 v.2, section 2.3.3 and 2.3.4:
the infinity point is represented by the single 0x00 octet.
"""

from eckeycheck.alias import INF, Octets, Point
from eckeycheck.curve import DomainParameters
from eckeycheck.exceptions import ECKeyCheckValueError
from eckeycheck.utils import bytes_from_octets, hex_string

INF_OCTETS = b"\x00"


def bytes_from_point(Q: Point, ec: DomainParameters) -> bytes:
    """Return a point as uncompressed octet sequence.

    Return a point as uncompressed (0x04) octet sequence,
    according to SEC 1 v.2, section 2.3.3.
    The infinity point is encoded as 0x00.
    """

    # check that Q is a point and that is on curve
    ec.require_on_curve(Q)

    if Q[1] == 0:  # infinity point in affine coordinates
        return INF_OCTETS

    bPx = Q[0].to_bytes(ec.psize, byteorder="big")
    return b"\x04" + bPx + Q[1].to_bytes(ec.psize, byteorder="big")


def point_from_octets(pubkey: Octets, ec: DomainParameters) -> Point:
    """Return a tuple (Px, Py) that belongs to the curve.

    Only the uncompressed and the infinity representations are accepted:
    decompression would require a modular square root.
    """

    pubkey = bytes_from_octets(pubkey, (1, 2 * ec.psize + 1))

    if pubkey == INF_OCTETS:
        return INF

    if pubkey[0] != 0x04:
        raise ECKeyCheckValueError(f"not an uncompressed point: {pubkey!r}")

    Px = int.from_bytes(pubkey[1 : ec.psize + 1], byteorder="big")
    P = Px, int.from_bytes(pubkey[ec.psize + 1 :], byteorder="big")
    if P[1] == 0:  # infinity point in affine coordinates
        raise ECKeyCheckValueError("invalid zero y-coordinate")
    if ec.is_on_curve(P):
        return P
    raise ECKeyCheckValueError(
        f"point not on curve: ('{hex_string(P[0])}', '{hex_string(P[1])}')"
    )
