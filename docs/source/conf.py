#!/usr/bin/env python3

# Copyright (C) 2022 The eckeycheck developers
#
# This file is part of eckeycheck. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eckeycheck including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Configuration file for the Sphinx documentation builder.

For the full list of built-in configuration values, see the
documentation: https://www.sphinx-doc.org/en/master/usage/configuration.html
"""

import os
import sys

sys.path.insert(0, os.path.abspath("../.."))

import eckeycheck  # noqa: E402  # pylint: disable=wrong-import-position

# -- Project information -----------------------------------------------------

project = eckeycheck.name
project_copyright = eckeycheck.__copyright__
author = eckeycheck.__author__
release = eckeycheck.__version__

# -- General configuration ---------------------------------------------------

extensions = [
    "myst_parser",
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

source_suffix = [".rst", ".md"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

autodoc_member_order = "bysource"

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"
