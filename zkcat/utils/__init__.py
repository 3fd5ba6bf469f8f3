"""Utility modules for common operations."""

from zkcat.utils.hashing import compute_sha256, compute_sha256_text, sha256_digest
from zkcat.utils.indices import parse_redaction_indices

__all__ = [
    "compute_sha256",
    "compute_sha256_text",
    "parse_redaction_indices",
    "sha256_digest",
]
