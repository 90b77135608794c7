# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="flexpath",
    version="0.1.0",
    description="Relative or absolute path references that normalize as they are joined",
    packages=find_packages(include=["flexpath", "flexpath.*"]),
    python_requires=">=3.8",
    install_requires=[
        "click",  # Command line interface
        "loguru",  # Logging
        "tomlkit",  # Config file that preserves comments
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "flexpath=flexpath.__main__:main",
        ],
    },
)
