"""Application layer for zkcat.

This layer orchestrates the redaction-commitment protocol without direct
filesystem access. All side effects are delegated to adapters via ports.
"""

__all__ = [
    "ProofResult",
    "ProverService",
    "VerifierService",
]

from zkcat.app.prover_service import ProofResult, ProverService
from zkcat.app.verifier_service import VerifierService
