"""Port interfaces for the zkcat application layer.

These protocol interfaces define contracts for adapters.
Domain logic depends on these ports, never on concrete implementations.
"""

__all__ = [
    "Program",
    "ProveInfo",
    "ProverEnginePort",
    "Receipt",
    "SignerPort",
    "StoragePort",
]

from zkcat.app.ports.engine import Program, ProveInfo, ProverEnginePort, Receipt
from zkcat.app.ports.signer import SignerPort
from zkcat.app.ports.storage import StoragePort
