#!/usr/bin/env python3
"""
Setup script for clusterconf package.
"""

from setuptools import setup, find_packages

setup(
    name="clusterconf",
    version="0.1.0",
    description="Configuration schema and registry engine for cluster management",
    author="clusterconf Team",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9",
        "rich>=13.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "clusterconf=clusterconf.cli.main:main",
        ],
    },
)
