"""Allwinner board identity: chip ID, serial, platform and fingerprint."""

__version__ = "1.0.0"
