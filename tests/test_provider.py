#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `eckeycheck.provider` module."

import pytest

from eckeycheck.alias import INF
from eckeycheck.curves import secp256r1
from eckeycheck.keys import PublicKeyMaterial
from eckeycheck.provider import KeyProvider, check_public_key


def test_check_public_key() -> None:

    ec = secp256r1
    check_public_key(PublicKeyMaterial(ec, ec.G))
    check_public_key(PublicKeyMaterial(ec, (ec.G[0], ec.p - ec.G[1])))

    err_msg = "public point must be a sequence\\[int, int\\]"
    with pytest.raises(ValueError, match=err_msg):
        check_public_key(PublicKeyMaterial(ec, (1, 2, 3)))  # type: ignore

    with pytest.raises(ValueError, match="public point is the infinity point"):
        check_public_key(PublicKeyMaterial(ec, INF))

    err_msg = "invalid public point: y-coordinate not in 1..p-1: "
    with pytest.raises(ValueError, match=err_msg):
        check_public_key(PublicKeyMaterial(ec, (ec.G[0], ec.p)))

    err_msg = "invalid public point: x-coordinate not in 0..p-1: "
    with pytest.raises(ValueError, match=err_msg):
        check_public_key(PublicKeyMaterial(ec, (-1, ec.G[1])))

    with pytest.raises(ValueError, match="public point not on curve secp256r1"):
        check_public_key(PublicKeyMaterial(ec, (ec.G[0], ec.G[1] + 1)))

    with pytest.raises(TypeError, match="point must be a tuple"):
        check_public_key(PublicKeyMaterial(ec, list(ec.G)))  # type: ignore


def test_abstract_provider(provider) -> None:

    with pytest.raises(TypeError):
        KeyProvider()  # type: ignore  # pylint: disable=abstract-class-instantiated

    assert repr(provider) == "FakeProvider('fake')"
