#!/usr/bin/env python3
"""
ripsgrid: Vietoris-Rips homology on integer grids

Setup script for installation.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="ripsgrid",
    version="1.0.0",
    author="ripsgrid contributors",
    description="Betti numbers and hole representatives of Rips complexes on integer grids",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["ripsgrid", "ripsgrid.*"]),
    py_modules=["main"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "scipy>=1.7.0",
        "networkx>=2.6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ripsgrid=main:main",
        ],
    },
)
