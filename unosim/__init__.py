"""Automated UNO table simulation."""

__version__ = "0.1.0"
