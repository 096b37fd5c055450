"""Security utilities.

Re-exports all security-related functions for convenience.
"""

from src.pitchdesk.core.security.crypto import (
    ACCESS_TOKEN_TYPE,
    create_access_token,
    decode_token,
)

__all__ = [
    "ACCESS_TOKEN_TYPE",
    "create_access_token",
    "decode_token",
]
