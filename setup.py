"""
setup.py

Packaging metadata and CLI entry point for code-bundler.

Version 1.0.0: click command group with bundle and create-rsp subcommands,
response file (@file) expansion and an explicit --root directory.
"""
from setuptools import setup, find_packages

setup(
    name="code-bundler",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "code-bundler=cli:cli",
        ],
    },
    python_requires=">=3.10",
)
