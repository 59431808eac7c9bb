"""
Stumbler HTTP

Small synchronous HTTP helpers for fetching resources and uploading
gzip-compressed JSON reports.
"""

__version__ = "0.1.0"
