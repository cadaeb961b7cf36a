#!/usr/bin/env python

import re
import os

from setuptools import setup, find_packages


with open("lettershift/__init__.py") as f:
    _version = re.search(r"__version__\s+=\s+\'(.*)\'", f.read()).group(1)


CURDIR = os.path.dirname(os.path.abspath(__file__))
with open(os.path.join(CURDIR, "requirements.txt")) as requirements:
    REQUIREMENTS = requirements.read().splitlines()


setup(
    name="lettershift",
    version=_version,
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="Caesar and Vigenere ciphers over the Latin and Cyrillic alphabets",
    license="MIT",
    python_requires=">=3.8",
    entry_points={"console_scripts": ["lettershift=lettershift.cli:main_cli"]},
    install_requires=REQUIREMENTS,
    extras_require={"test": ["pytest"]},
)
