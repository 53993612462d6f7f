"""
Business logic services for the MediaFire client.
"""

from mediafire_client.services.auth_service import AuthService
from mediafire_client.services.import_service import ImportService
from mediafire_client.services.line_parser import LineParser

__all__ = [
    "AuthService",
    "ImportService",
    "LineParser",
]
