#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Run all checks against a key provider and collect the results.

A hard failure aborts only the check raising it:
the remaining checks are run anyway.
Skipped checks are reported apart from failed ones,
to tell "not applicable here" from "broken".
"""

import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Iterable, List, Tuple

from dataclasses_json import DataClassJsonMixin, config

from eckeycheck import checks
from eckeycheck.checks import Outcome
from eckeycheck.config import KEYGEN_CURVE_NAMES
from eckeycheck.curves import get_named_curve
from eckeycheck.exceptions import CheckFailure
from eckeycheck.provider import KeyProvider

logger = logging.getLogger(__name__)


@dataclass
class CheckResult(DataClassJsonMixin):
    name: str
    outcome: Outcome = field(
        metadata=config(encoder=lambda v: v.value, decoder=Outcome)
    )
    detail: str = ""

    @property
    def is_failure(self) -> bool:
        return self.outcome in (Outcome.FAILED, Outcome.ERROR)


Check = Callable[[KeyProvider], Outcome]


def _suite_checks(curve_names: Iterable[str]) -> List[Tuple[str, Check]]:
    result: List[Tuple[str, Check]] = [
        ("malformed public keys", checks.check_malformed_public_keys),
        ("private key round trip", checks.check_private_key_round_trip),
        ("public key round trip", checks.check_public_key_round_trip),
    ]
    for ec_name in curve_names:
        params = get_named_curve(ec_name)
        check = partial(checks.check_key_generation, params=params)
        result.append((f"{params.name} key generation", check))
    result.append(("default key generation", checks.check_default_key_generation))
    result.append(("public key at infinity", checks.check_public_key_at_infinity))
    return result


def run_check(provider: KeyProvider, name: str, check: Check) -> CheckResult:
    try:
        outcome = check(provider)
    except CheckFailure as e:
        logger.error("%s failed: %s", name, e)
        return CheckResult(name, Outcome.FAILED, str(e))
    except Exception as e:  # pylint: disable=broad-except
        logger.exception("%s raised an unexpected exception", name)
        return CheckResult(name, Outcome.ERROR, f"{type(e).__name__}: {e}")
    logger.info("%s %s", name, outcome.value)
    return CheckResult(name, outcome)


def run_suite(
    provider: KeyProvider, curve_names: Iterable[str] = KEYGEN_CURVE_NAMES
) -> List[CheckResult]:
    "Run every check, in a fixed order, and return their results."

    return [
        run_check(provider, name, check) for name, check in _suite_checks(curve_names)
    ]
