#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Command line interface: check the EC key handling of pyca/cryptography."

import argparse
import json
import logging
import sys
from typing import List, Optional

from eckeycheck import __version__
from eckeycheck.config import DEFAULT_CURVE_NAME, KEYGEN_CURVE_NAMES, LOG_LEVEL
from eckeycheck.cryptography_provider import CryptographyProvider
from eckeycheck.curves import get_named_curve
from eckeycheck.suite import run_suite


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="eckeycheck",
        description="Check the EC key handling of a cryptographic provider.",
    )
    parser.add_argument(
        "--curve",
        action="append",
        dest="curves",
        metavar="NAME",
        help="curve for the key generation checks (repeatable)",
    )
    parser.add_argument(
        "--default-curve",
        default=DEFAULT_CURVE_NAME,
        metavar="NAME",
        help="provider default curve, empty for none",
    )
    parser.add_argument("--json", action="store_true", help="print a JSON report")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=__version__)
    args = parser.parse_args(argv)

    try:
        curves = [get_named_curve(n) for n in args.curves or KEYGEN_CURVE_NAMES]
        if args.default_curve:
            get_named_curve(args.default_curve)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    provider = CryptographyProvider(args.default_curve)
    results = run_suite(provider, [params.name for params in curves])

    if args.json:
        print(json.dumps([result.to_dict() for result in results], indent=2))
    else:
        for result in results:
            line = f"{result.outcome.value.upper():8} {result.name}"
            if result.detail:
                line += f": {result.detail}"
            print(line)

    return 1 if any(result.is_failure for result in results) else 0


if __name__ == "__main__":
    sys.exit(main())
