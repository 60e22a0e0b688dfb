#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Key material as returned by a key provider.

These are plain containers: they never validate themselves,
since judging what a provider returns is the job of the checks.
"""

from dataclasses import dataclass

from eckeycheck.alias import Point
from eckeycheck.curve import DomainParameters


@dataclass(frozen=True)
class PublicKeyMaterial:
    params: DomainParameters
    W: Point


@dataclass(frozen=True)
class PrivateKeyMaterial:
    params: DomainParameters
    # private scalar
    s: int


@dataclass(frozen=True)
class KeyPair:
    public: PublicKeyMaterial
    private: PrivateKeyMaterial

    @property
    def params(self) -> DomainParameters:
        return self.public.params
