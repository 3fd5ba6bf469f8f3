"""Hashing utilities for document digests."""

import hashlib


def sha256_digest(content: bytes) -> bytes:
    """Compute the raw 32-byte SHA-256 digest of content.

    Args:
        content: Bytes to hash

    Returns:
        Raw digest bytes
    """
    return hashlib.sha256(content).digest()


def compute_sha256(content: bytes) -> str:
    """Compute SHA-256 hash of content.

    Args:
        content: Bytes to hash

    Returns:
        Hexadecimal hash string
    """
    return hashlib.sha256(content).hexdigest()


def compute_sha256_text(text: str) -> bytes:
    """Digest of ``text`` encoded as UTF-8, the byte form every digest is taken over."""
    return sha256_digest(text.encode("utf-8"))
