"""Local attestation engine.

Executes the guest program in-process and seals the claim
``(image_id, SHA-256(journal))`` with an Ed25519 signature. A receipt is
accepted only when it is bound to the expected image id and sealed by a
trusted key.

This adapter attests honest execution by the key holder; it does not hide
the private input from that holder and offers no succinctness. Proof-system
guarantees come from whichever engine is plugged into the port instead.
"""

from __future__ import annotations

import hmac
import logging
from collections.abc import Iterable
from typing import Any

from zkcat.app.ports import Program, ProveInfo, ProverEnginePort, Receipt, SignerPort
from zkcat.errors import EngineError
from zkcat.utils.hashing import sha256_digest

logger = logging.getLogger(__name__)

CLAIM_DOMAIN = b"zkcat-receipt-v1\x00"


def build_claim(image_id: str, journal: bytes) -> bytes:
    """Bytes the seal signs: domain tag, image id, journal digest."""
    return CLAIM_DOMAIN + bytes.fromhex(image_id) + sha256_digest(journal)


class LocalAttestationEngine(ProverEnginePort):
    """Prove by running the guest locally, verify by checking the seal."""

    def __init__(self, signer: SignerPort, *, trusted_keys: Iterable[str] = ()) -> None:
        self._signer = signer
        self._trusted_keys = {key.lower() for key in trusted_keys}
        self._trusted_keys.add(signer.public_key().lower())

    def prove(self, program: Program, private_input: Any) -> ProveInfo:
        logger.debug("Executing guest program %s (image %s)", program.name, program.image_id)
        try:
            journal = program.entrypoint(private_input)
        except Exception as exc:  # noqa: BLE001 - any guest failure aborts proving
            raise EngineError(
                f"Guest program {program.name} failed: {exc}", phase="prove"
            ) from exc

        if not isinstance(journal, bytes):
            raise EngineError(
                f"Guest program {program.name} returned {type(journal).__name__}, expected bytes",
                phase="prove",
            )

        seal = self._signer.sign(build_claim(program.image_id, journal))
        receipt = Receipt(
            image_id=program.image_id,
            journal=journal.hex(),
            seal=seal.hex(),
            signer=self._signer.public_key(),
        )
        return ProveInfo(receipt=receipt, journal=journal)

    def verify(self, image_id: str, receipt: Receipt) -> bytes:
        try:
            bound_image = bytes.fromhex(receipt.image_id)
        except ValueError as exc:
            raise EngineError("Receipt image id is not valid hex", phase="verify") from exc

        if not hmac.compare_digest(bound_image, bytes.fromhex(image_id)):
            raise EngineError(
                f"Receipt is bound to image {receipt.image_id}, expected {image_id}",
                phase="verify",
            )

        if receipt.signer.lower() not in self._trusted_keys:
            raise EngineError(
                f"Receipt sealed by untrusted key {receipt.signer or '<none>'}",
                phase="verify",
            )

        try:
            journal = receipt.journal_bytes()
            seal = bytes.fromhex(receipt.seal)
        except ValueError as exc:
            raise EngineError("Receipt journal or seal is not valid hex", phase="verify") from exc

        if not self._signer.verify(build_claim(image_id, journal), seal, receipt.signer):
            raise EngineError("Receipt seal does not verify", phase="verify")

        return journal
