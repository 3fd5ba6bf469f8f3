"""Proof generation service.

Reads a document, has the engine prove the redaction commitment, checks the
commitment against the host's own view, and persists the receipt. All I/O is
delegated to ports.
"""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from pathlib import Path

from zkcat.app.ports import Program, ProverEnginePort, StoragePort
from zkcat.app.programs import REDACTION_PROGRAM
from zkcat.config import Settings
from zkcat.errors import ConsistencyError, EngineError, IoError
from zkcat.guest import Commitment, JournalDecodeError, RedactionInput, decode_journal
from zkcat.guest.redaction import redact_lines, split_lines
from zkcat.utils.hashing import compute_sha256_text
from zkcat.utils.indices import parse_redaction_indices

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProofResult:
    """Outcome of a successful proving run."""

    commitment: Commitment
    proof_path: Path
    image_id: str
    lines: list[str]
    redacted_lines: list[str]
    redacted_path: Path | None = None


class ProverService:
    """Generate, cross-check and persist redaction proofs.

    A run either ends with a receipt on disk whose commitment matches the
    host's digest and requested indices, or raises and writes nothing.
    """

    def __init__(
        self,
        *,
        engine: ProverEnginePort,
        storage_port: StoragePort,
        settings: Settings,
        program: Program = REDACTION_PROGRAM,
    ) -> None:
        """Initialize prover service.

        Args:
            engine: Verifiable computation engine handle
            storage_port: Filesystem operations port
            settings: Application settings (proof suffix)
            program: Guest program to prove (the redaction program by default)
        """
        self.engine = engine
        self.storage = storage_port
        self.program = program
        self._settings = settings

    def generate_proof(
        self,
        path: Path,
        redact: str | None = None,
        *,
        output: Path | None = None,
    ) -> ProofResult:
        """Prove the redaction of ``path`` at the lines listed in ``redact``.

        Args:
            path: Document to prove
            redact: Comma-separated zero-based line indices (lenient)
            output: Optional destination for the redacted text

        Returns:
            ProofResult with the verified commitment and artifact location

        Raises:
            IoError: Document unreadable/not UTF-8, or an output write failed
            EngineError: Proving failed or the proof failed self-verification
            ConsistencyError: Commitment disagrees with the host (nothing persisted)
        """
        document = Path(path)
        content = self._read_document(document)
        indices = parse_redaction_indices(redact)

        local_full_digest = compute_sha256_text(content)
        logger.info(
            "Proving %s (sha256 %s) with %d redaction index(es)",
            document,
            local_full_digest.hex(),
            len(indices),
        )

        info = self.engine.prove(self.program, RedactionInput(content, tuple(indices)))

        try:
            journal = self.engine.verify(self.program.image_id, info.receipt)
        except EngineError as exc:
            raise EngineError(f"Proof verification failed: {exc}", phase="verify") from exc

        try:
            commitment = decode_journal(journal)
        except JournalDecodeError as exc:
            raise EngineError(f"Engine returned a malformed journal: {exc}", phase="verify") from exc

        self._cross_check(commitment, local_full_digest, indices)

        proof_path = self._settings.get_proof_path(document)
        self._write(proof_path, info.receipt.to_bytes(), what="proof")
        logger.info("Proof saved to %s", proof_path)

        lines = split_lines(content)
        redacted = redact_lines(lines, indices)

        redacted_path: Path | None = None
        if output is not None:
            redacted_path = Path(output)
            try:
                self._write(
                    redacted_path, "\n".join(redacted).encode("utf-8"), what="redacted text"
                )
            except IoError:
                logger.warning("Removing %s after failed redacted text write", proof_path)
                self.storage.delete(proof_path)
                raise
            logger.info("Redacted text written to %s", redacted_path)

        return ProofResult(
            commitment=commitment,
            proof_path=proof_path,
            image_id=self.program.image_id,
            lines=lines,
            redacted_lines=redacted,
            redacted_path=redacted_path,
        )

    def _read_document(self, document: Path) -> str:
        try:
            return self.storage.read_text(document)
        except UnicodeDecodeError as exc:
            raise IoError(f"Input file is not valid UTF-8: {document}", phase="read") from exc
        except OSError as exc:
            raise IoError(f"Failed to read input file {document}: {exc}", phase="read") from exc

    def _write(self, destination: Path, data: bytes, *, what: str) -> None:
        try:
            self.storage.write_bytes(destination, data)
        except OSError as exc:
            raise IoError(f"Failed to save {what} file {destination}: {exc}", phase="persist") from exc

    @staticmethod
    def _cross_check(
        commitment: Commitment,
        local_full_digest: bytes,
        requested: list[int],
    ) -> None:
        """Hold the engine's commitment to the host's digest and requested indices."""
        if not hmac.compare_digest(commitment.full_digest, local_full_digest):
            logger.error(
                "Full digest mismatch: host %s, guest %s",
                local_full_digest.hex(),
                commitment.full_sha256,
            )
            raise ConsistencyError(
                "Full file hash mismatch between host and guest", phase="cross-check"
            )

        if commitment.index_set() != set(requested):
            logger.error(
                "Index mismatch: requested %s, guest committed %s",
                sorted(set(requested)),
                sorted(commitment.index_set()),
            )
            raise ConsistencyError(
                "Redaction indices mismatch between host and guest", phase="cross-check"
            )
