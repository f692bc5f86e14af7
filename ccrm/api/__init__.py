"""
API module for the REST API implementation.
"""

from .rest_api import CcrmRestAPI

__all__ = [
    "CcrmRestAPI",
]
