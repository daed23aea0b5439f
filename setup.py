#!/usr/bin/env python
"""
Setup script for TextXref project
Installs the package, its dependencies, and the textxref command
"""

from pathlib import Path
from setuptools import setup, find_packages


def read_requirements():
    """Read runtime dependencies from requirements.txt"""
    path = Path(__file__).parent / "requirements.txt"
    lines = path.read_text().splitlines()
    return [line.strip() for line in lines if line.strip() and not line.startswith('#')]


setup(
    name="textxref",
    version="1.0.0",
    description="Cross-reference index over named texts",
    packages=find_packages(include=["textxref", "textxref.*"]),
    python_requires=">=3.8",
    install_requires=read_requirements(),
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "textxref=textxref.shell:main",
        ],
    },
)
