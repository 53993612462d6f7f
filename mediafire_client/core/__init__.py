"""
Core client state shared across services.
"""

from mediafire_client.core.token_pool import (
    DEFAULT_POOL_SIZE,
    MAX_POOL_SIZE,
    SessionTokenPool,
    clamp_capacity,
)

__all__ = ["DEFAULT_POOL_SIZE", "MAX_POOL_SIZE", "SessionTokenPool", "clamp_capacity"]
