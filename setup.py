# Copyright 2026, Spellfix contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.

from setuptools import setup, find_packages
import version

REQUIRES = [
    "requests >= 2.9.1",
]

setup(
    author="Spellfix contributors",
    entry_points={
        "console_scripts": [
            "spellfix = spellfix.__main__:main",
        ],
    },
    install_requires=REQUIRES,
    extras_require={
        "completion": ["argcomplete"],
        "test": ["pytest"],
    },
    license="Apache 2.0",
    name="spellfix",
    packages=find_packages(exclude=["tests"]),
    platforms=["POSIX", "MacOS", "Windows"],
    description="Dictionary spell checker and bounded edit distance corrector",
    long_description=open("README.rst").read(),
    python_requires=">=3.8",
    version=version.get_project_version("spellfix/version.py"),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Topic :: Text Processing :: Linguistic",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
