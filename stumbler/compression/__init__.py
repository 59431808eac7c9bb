"""
Compression Module

Gzip encoding for request bodies.
"""

from .zipper import unzip_data, zip_data

__all__ = [
    "unzip_data",
    "zip_data",
]
