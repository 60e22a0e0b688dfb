""" eckeycheck build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import eckeycheck

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=eckeycheck.name,
    version=eckeycheck.__version__,
    license=eckeycheck.__license__,
    author=eckeycheck.__author__,
    author_email=eckeycheck.__author_email__,
    description="Conformance checks for elliptic curve key handling",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"eckeycheck": ["data/*.json"]},
    include_package_data=True,
    install_requires=["cryptography>=3.1", "dataclasses_json"],
    extras_require={
        "tests": ["pytest"],
        "docs": ["sphinx", "myst_parser", "sphinx_rtd_theme"],
    },
    entry_points={"console_scripts": ["eckeycheck=eckeycheck.__main__:main"]},
    keywords=(
        "cryptography elliptic-curves ecdsa ecdh key-validation "
        "test-vectors x509 pkcs8 conformance"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Testing",
    ],
)
