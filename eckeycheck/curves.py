#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Named elliptic curves.

* Federal Information Processing Standards Publication 186-4
  (NIST) curves
  https://nvlpubs.nist.gov/nistpubs/FIPS/NIST.FIPS.186-4.pdf
* ANSI X9.62 prime curves (prime239v1)
* Brainpool standard curves
  https://tools.ietf.org/html/rfc5639
"""

import json
from os import path
from typing import Dict

from eckeycheck.curve import DomainParameters
from eckeycheck.exceptions import ECKeyCheckValueError

datadir = path.join(path.dirname(__file__), "data")


def _load(filename: str) -> Dict[str, DomainParameters]:
    with open(path.join(datadir, filename), "r", encoding="ascii") as file_:
        params = json.load(file_)
    return {ec_name: DomainParameters.from_dict(params[ec_name]) for ec_name in params}


# FIPS PUB 186-4
NIST = _load("ec_NIST.json")
# ANSI X9.62, as also listed in SEC 2 v.1
X962 = _load("ec_X962.json")
# Elliptic Curve Cryptography (ECC)
# Brainpool Standard Curves and Curve Generation
Brainpool = _load("ec_Brainpool.json")

CURVES: Dict[str, DomainParameters] = {}
CURVES.update(NIST)
CURVES.update(X962)
CURVES.update(Brainpool)

# alternative names, lower case
_ALIASES = {
    "p-224": "secp224r1",
    "nistp224": "secp224r1",
    "prime224v1": "secp224r1",
    "p-256": "secp256r1",
    "nistp256": "secp256r1",
    "prime256v1": "secp256r1",
    "p-384": "secp384r1",
    "nistp384": "secp384r1",
    "p-521": "secp521r1",
    "nistp521": "secp521r1",
}
_ALIASES.update({ec_name.lower(): ec_name for ec_name in CURVES})


def get_named_curve(ec_name: str) -> DomainParameters:
    """Return the domain parameters of a named curve.

    SEC names (e.g. 'secp256r1'), NIST names (e.g. 'P-256'),
    and the nistP256 style names are all accepted;
    the lookup is case insensitive.
    """

    key = ec_name.strip().lower()
    if key not in _ALIASES:
        raise ECKeyCheckValueError(f"unknown curve: {ec_name}")
    return CURVES[_ALIASES[key]]


secp224r1 = CURVES["secp224r1"]
secp256r1 = CURVES["secp256r1"]
secp384r1 = CURVES["secp384r1"]
secp521r1 = CURVES["secp521r1"]
prime239v1 = CURVES["prime239v1"]
brainpoolP256r1 = CURVES["brainpoolP256r1"]
