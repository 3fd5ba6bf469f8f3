"""Independent verification of stored proof artifacts."""

from __future__ import annotations

import logging
from pathlib import Path

from zkcat.app.ports import Program, ProverEnginePort, Receipt, StoragePort
from zkcat.app.programs import REDACTION_PROGRAM
from zkcat.errors import EngineError, IoError, VerificationError
from zkcat.guest import Commitment, JournalDecodeError, decode_journal

logger = logging.getLogger(__name__)


class VerifierService:
    """Check a receipt against the fixed redaction program and expose its commitment.

    The original document is never needed: the receipt's validity is the
    whole guarantee, so no host-side cross-check happens here.
    """

    def __init__(
        self,
        *,
        engine: ProverEnginePort,
        storage_port: StoragePort,
        program: Program = REDACTION_PROGRAM,
    ) -> None:
        self.engine = engine
        self.storage = storage_port
        self.program = program

    def verify_proof(self, artifact_path: Path) -> Commitment:
        """Verify the receipt at ``artifact_path`` and return its commitment.

        Raises:
            IoError: The artifact cannot be read
            VerificationError: The artifact is malformed or rejected by the engine
        """
        artifact = Path(artifact_path)
        try:
            data = self.storage.read_bytes(artifact)
        except OSError as exc:
            raise IoError(f"Failed to read proof file {artifact}: {exc}", phase="read") from exc

        try:
            receipt = Receipt.from_bytes(data)
        except ValueError as exc:
            raise VerificationError(f"Failed to deserialize proof: {exc}", phase="verify") from exc

        try:
            journal = self.engine.verify(self.program.image_id, receipt)
        except EngineError as exc:
            logger.warning("Proof %s rejected: %s", artifact, exc)
            raise VerificationError(f"Proof verification failed: {exc}", phase="verify") from exc

        try:
            commitment = decode_journal(journal)
        except JournalDecodeError as exc:
            raise VerificationError(f"Proof journal is malformed: {exc}", phase="verify") from exc

        logger.info("Proof %s verified (image %s)", artifact, receipt.image_id)
        return commitment
