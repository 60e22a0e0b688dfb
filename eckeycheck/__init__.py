#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the eckeycheck package."

name = "eckeycheck"
__version__ = "2022.11.1"
__author__ = "The eckeycheck developers"
__author_email__ = "devs@eckeycheck.org"
__copyright__ = "Copyright (C) 2022 The eckeycheck developers"
__license__ = "MIT License"
