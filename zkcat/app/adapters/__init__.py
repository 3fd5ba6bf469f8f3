"""Concrete adapters wiring application ports to built-in implementations."""

from __future__ import annotations

from .attested_engine import LocalAttestationEngine
from .signer import Ed25519Signer
from .storage import FileSystemStorageAdapter
from .timeout import TimeoutEngine

__all__ = [
    "Ed25519Signer",
    "FileSystemStorageAdapter",
    "LocalAttestationEngine",
    "TimeoutEngine",
]
