#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `eckeycheck.suite` module."

import json

from eckeycheck.checks import Outcome
from eckeycheck.config import KEYGEN_CURVE_NAMES
from eckeycheck.exceptions import ErrorKind
from eckeycheck.suite import CheckResult, run_check, run_suite


def test_run_suite(provider) -> None:

    results = run_suite(provider)
    assert len(results) == 5 + len(KEYGEN_CURVE_NAMES)
    assert all(r.outcome == Outcome.PASSED for r in results)
    assert not any(r.is_failure for r in results)

    names = [r.name for r in results]
    assert names[:3] == [
        "malformed public keys",
        "private key round trip",
        "public key round trip",
    ]
    assert names[3] == "secp224r1 key generation"
    assert names[-2:] == ["default key generation", "public key at infinity"]


def test_run_suite_curve_names(provider) -> None:

    results = run_suite(provider, ["P-256", "nistP384"])
    names = [r.name for r in results]
    assert "secp256r1 key generation" in names
    assert "secp384r1 key generation" in names
    assert len(results) == 7


def test_failure_does_not_stop_the_suite(provider) -> None:

    provider.parse_error = None
    results = run_suite(provider)
    assert results[0].outcome == Outcome.FAILED
    assert results[0].is_failure
    assert "constructed invalid public key" in results[0].detail
    assert all(r.outcome == Outcome.PASSED for r in results[1:])


def test_skips_are_not_failures(provider) -> None:

    provider.unsupported.add("prime239v1")
    provider.default_params = None
    results = {r.name: r for r in run_suite(provider)}
    assert results["prime239v1 key generation"].outcome == Outcome.SKIPPED
    assert results["default key generation"].outcome == Outcome.SKIPPED
    assert not any(r.is_failure for r in results.values())


def test_unexpected_errors(provider) -> None:

    provider.parse_error = ErrorKind.INTERNAL
    result = run_suite(provider)[0]
    assert result.outcome == Outcome.ERROR
    assert result.is_failure
    assert result.detail == "ProviderError: internal: invalid parameters"

    def broken(_):
        raise ZeroDivisionError("division by zero")

    result = run_check(provider, "broken", broken)
    detail = "ZeroDivisionError: division by zero"
    assert result == CheckResult("broken", Outcome.ERROR, detail)


def test_json() -> None:

    result = CheckResult("public key at infinity", Outcome.PASSED)
    assert '"outcome": "passed"' in result.to_json()
    assert json.loads(result.to_json())["detail"] == ""

    result = CheckResult("malformed public keys", Outcome.FAILED, "accepted")
    assert CheckResult.from_dict(result.to_dict()) == result
    assert CheckResult.from_json(result.to_json()) == result
