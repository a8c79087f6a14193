"""Dipole moment estimation from bond and bond-angle data."""

__version__ = "0.1.0"
