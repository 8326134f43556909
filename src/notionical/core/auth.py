"""Constant-time access token check."""

import hmac


def authenticate(presented: str, expected: str) -> bool:
    """Check a caller-supplied token against the configured one.

    Args:
        presented: Token supplied by the caller.
        expected: Configured access token.

    Returns:
        True if both tokens are byte-for-byte identical.
    """
    return tokens_match(presented.encode("utf-8"), expected.encode("utf-8"))


def tokens_match(given: bytes, actual: bytes) -> bool:
    """Compare two encoded tokens.

    Differing lengths short-circuit to False; length is not secret.
    Equal-length inputs are compared with ``hmac.compare_digest``, whose
    running time depends only on the length.
    """
    if len(given) != len(actual):
        return False
    return hmac.compare_digest(given, actual)
