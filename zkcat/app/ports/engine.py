"""Verifiable computation engine port.

The engine is consumed as a black box: it runs a program over private input,
returns the committed journal together with a receipt, and later checks a
receipt against a program identity without access to the private input.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from zkcat.utils.hashing import compute_sha256

RECEIPT_FORMAT = "zkcat-receipt"
RECEIPT_VERSION = 1


@dataclass(frozen=True, slots=True)
class Program:
    """A guest program and the identity receipts are bound to."""

    name: str
    image_id: str
    entrypoint: Callable[[Any], bytes]

    @classmethod
    def from_module(
        cls,
        name: str,
        module: ModuleType,
        *,
        includes: tuple[ModuleType, ...] = (),
    ) -> "Program":
        """Build a program from ``module.main``.

        The image id is the SHA-256 of the source bytes of ``module`` followed
        by each of ``includes``, each prefixed with its length. Any change to
        that source yields a different identity.
        """
        image = bytearray()
        for part in (module, *includes):
            source = _read_module_source(part)
            image += len(source).to_bytes(8, "little")
            image += source
        return cls(name=name, image_id=compute_sha256(bytes(image)), entrypoint=module.main)


def _read_module_source(module: ModuleType) -> bytes:
    path = getattr(module, "__file__", None)
    if path is None:
        raise ValueError(f"Module {module.__name__} has no source file")
    return Path(path).read_bytes()


class Receipt(BaseModel):
    """Serialized proof artifact.

    ``journal`` and ``seal`` are opaque to the host; only the engine that
    produced the receipt interprets the seal.
    """

    model_config = ConfigDict(frozen=True)

    format: str = Field(default=RECEIPT_FORMAT, description="Artifact format tag")
    version: int = Field(default=RECEIPT_VERSION, description="Artifact format version")
    image_id: str = Field(..., description="Hex program identity the receipt is bound to")
    journal: str = Field(..., description="Hex-encoded committed journal")
    seal: str = Field(..., description="Hex-encoded engine attestation")
    signer: str = Field(default="", description="Hex public key of the sealing party")

    def journal_bytes(self) -> bytes:
        return bytes.fromhex(self.journal)

    def to_bytes(self) -> bytes:
        """Serialize for durable storage."""
        return self.model_dump_json().encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes) -> "Receipt":
        """Parse a stored artifact.

        Raises:
            ValueError: If ``data`` is not a receipt of a supported version.
        """
        try:
            receipt = cls.model_validate_json(data)
        except ValidationError as exc:
            raise ValueError(f"Malformed receipt: {exc.error_count()} validation error(s)") from exc

        if receipt.format != RECEIPT_FORMAT or receipt.version != RECEIPT_VERSION:
            raise ValueError(
                f"Unsupported receipt format {receipt.format!r} version {receipt.version}"
            )
        for name in ("image_id", "journal", "seal", "signer"):
            try:
                bytes.fromhex(getattr(receipt, name))
            except ValueError as exc:
                raise ValueError(f"Receipt {name} is not valid hex") from exc
        return receipt


@dataclass(frozen=True, slots=True)
class ProveInfo:
    """Result of a proving run."""

    receipt: Receipt
    journal: bytes


class ProverEnginePort(Protocol):
    """Port interface for the verifiable computation engine.

    Adapters must raise :class:`zkcat.errors.EngineError` on any failure.
    """

    def prove(self, program: Program, private_input: Any) -> ProveInfo:
        """Run ``program`` over ``private_input`` and return journal plus receipt."""
        ...

    def verify(self, image_id: str, receipt: Receipt) -> bytes:
        """Check ``receipt`` against ``image_id`` and return the journal bytes."""
        ...
