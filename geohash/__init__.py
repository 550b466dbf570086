"""Encoding and decoding of string and integer geohashes.

The functions live in ``geohash.core``; the base32 codec in ``geohash.base32``.
"""

__version__ = "1.0.0"
__all__ = ["base32", "core"]