#!/usr/bin/env python3

"""Setup script for the molecular dipole estimation package."""

from setuptools import setup, find_packages

setup(
    name="dipolar",
    version="0.1.0",
    description="Dipole moment estimation from bond and bond-angle data",
    author="Adam",
    author_email="adam@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.20.0",
        "networkx>=2.6.0",
        "defusedxml>=0.7.1",
        "tomli>=1.1.0; python_version<'3.11'",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "dipolar=dipolar.presentation.cli.dipolar_cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Education",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
