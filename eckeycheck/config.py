#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Configuration.

Thresholds of the checks and the curves they run on.
A few settings can be overridden from the environment:

* ECKEYCHECK_DEFAULT_CURVE: curve used by CryptographyProvider
  when no parameters are given (empty string: no default curve)
* ECKEYCHECK_LOG_LEVEL: logging level of the command line interface
  (unknown level names fall back to WARNING)
"""

import logging
import os
from typing import Tuple

# A uniformly sampled private scalar is shorter than the group order
# by more than 32 bits with probability 2^-32.
# This is a statistical bound: it must not become an exact check.
ORDER_SLACK_BITS = 32

# NIST SP 800-57 part 1 rev. 4, table 2:
# 112 bits of security strength until 2030, i.e. 224-bit EC keys
MIN_DEFAULT_FIELD_SIZE = 224

# the cofactor must be a small positive integer
MAX_COFACTOR = 16

REFERENCE_CURVE_NAME = "secp256r1"

KEYGEN_CURVE_NAMES: Tuple[str, ...] = (
    "secp224r1",
    "secp256r1",
    "secp384r1",
    "secp521r1",
    "prime239v1",
    "brainpoolP256r1",
)

DEFAULT_CURVE_NAME = os.environ.get("ECKEYCHECK_DEFAULT_CURVE", "secp256r1")


def log_level_from_name(name: str, default: str = "WARNING") -> str:
    "Return the upper case logging level name, the default if unknown."
    level = name.strip().upper()
    return level if isinstance(logging.getLevelName(level), int) else default


LOG_LEVEL = log_level_from_name(os.environ.get("ECKEYCHECK_LOG_LEVEL", "WARNING"))
