"""Raycaster scene parsing and map checking, XPM texture loading and BMP output."""

__version__ = "0.1.0"