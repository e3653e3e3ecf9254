"""Security utilities: token validation.

Exports:
- validate_discord_token
- mask_token
"""

from .token import validate_discord_token, mask_token

__all__ = ["validate_discord_token", "mask_token"]
