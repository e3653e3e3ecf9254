"""Bot token checks run before the client connects."""
from __future__ import annotations

import re

# Three dot-separated base64url segments: user id, timestamp, HMAC
_SEGMENT_REGEX = re.compile(r"^[A-Za-z0-9_-]+$")
_PLACEHOLDERS = {"changeme", "your-token-here"}


def validate_discord_token(token: str) -> None:
    """Reject a token that cannot be a Discord bot token before logging in.

    The token is read from `DISCORD_TOKEN` in settings.toml/.secrets.toml,
    `BOT_DISCORD_TOKEN`, or the plain `DISCORD_TOKEN` environment variable.

    Raises:
        SystemExit: If the token is missing, a placeholder, or not three
            non-empty base64url segments.
    """
    if not token or token.strip().lower() in _PLACEHOLDERS:
        raise SystemExit("DISCORD_TOKEN not set (settings file, BOT_DISCORD_TOKEN or DISCORD_TOKEN)")
    segments = token.split('.')
    if len(segments) != 3 or not all(_SEGMENT_REGEX.match(s) for s in segments):
        raise SystemExit(
            "DISCORD_TOKEN format unexpected (three base64url parts joined by dots). "
            "Use the bot token, not the client secret or application ID."
        )


def mask_token(token: str) -> str:
    """Return the token with everything but its edges hidden, for startup logs."""
    if len(token) <= 8:
        return "***"
    segments = token.split('.')
    return segments[0][:4] + "..." + segments[-1][-4:]
