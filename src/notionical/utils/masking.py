"""Utilities for masking sensitive data."""

from typing import Optional


def mask_secret(secret: Optional[str]) -> str:
    """Mask a token or API secret for safe logging.

    Args:
        secret: The secret to mask.

    Returns:
        Masked secret showing only first and last 4 characters.
    """
    if not secret:
        return "<empty>"
    if len(secret) <= 8:
        return "***"
    return f"{secret[:4]}...{secret[-4:]}"
