"""
MediaFire API client layer.

Provides async HTTP communication with the MediaFire API.
"""

from mediafire_client.api.http_client import AsyncHttpClient, PendingRequest, sanitize_for_log

__all__ = ["AsyncHttpClient", "PendingRequest", "sanitize_for_log"]
