"""zkcat - Zero-knowledge file viewer with redaction proofs.

Proves that a document hashes to a public digest and that a redacted copy of
the same document hashes to a second public digest, without disclosing it.
"""

__version__ = "0.1.0"
__author__ = "zkcat Contributors"

from zkcat.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
