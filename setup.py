#!/usr/bin/env python3
"""
Setup script for Branch Validator package.
"""

import re

from setuptools import setup, find_packages

# Read metadata from the package without importing it
with open("branch_validator/__init__.py", encoding="utf-8") as f:
    version = dict(
        re.findall(r'^(__(?:version|author|description)__)\s*=\s*"([^"]*)"', f.read(), re.M)
    )

# Read requirements
with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="branch-validator",
    version=version["__version__"],
    author=version["__author__"],
    description=version["__description__"],
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["branch_validator", "branch_validator.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "branch-validator=branch_validator.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Text Processing :: General",
    ],
    keywords="validation text-format report cli",
)
