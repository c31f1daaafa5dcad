# SPDX-License-Identifier: LGPL-3.0-or-later
from setuptools import setup, find_packages

setup(
    name="perfcounter2csv",
    version="0.1.0",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.8",
    install_requires=[l.strip() for l in open("requirements.txt", encoding="utf-8") if l.strip() and not l.startswith("#")],
    extras_require={"tests": ["pytest>=7"]},
    entry_points={"console_scripts": ["perfcounter2csv=perfcounter2csv.__main__:main"]},
)
