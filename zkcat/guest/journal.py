"""Commitment type and its journal encoding.

The guest commits its public outputs in a fixed order; the host and any
verifier decode them in the same order:

    journal = full_digest (32 bytes)
              || redacted_digest (32 bytes)
              || u32_le(index_count)
              || concat(u64_le(index) for index in indices)

Indices are written exactly as requested (order and duplicates preserved).
"""

from __future__ import annotations

import struct

from pydantic import BaseModel, ConfigDict, Field, field_validator

DIGEST_SIZE = 32
MAX_INDEX = 2**64 - 1

_COUNT = struct.Struct("<I")
_INDEX = struct.Struct("<Q")
_HEADER_SIZE = 2 * DIGEST_SIZE + _COUNT.size


class JournalDecodeError(ValueError):
    """Raised when journal bytes do not match the committed layout."""


class Commitment(BaseModel):
    """Public outputs of one redaction run."""

    model_config = ConfigDict(frozen=True)

    full_digest: bytes = Field(..., description="SHA-256 of the original content")
    redacted_digest: bytes = Field(..., description="SHA-256 of the redacted content")
    indices: tuple[int, ...] = Field(
        default=(), description="Requested line indices, echoed verbatim"
    )

    @field_validator("full_digest", "redacted_digest")
    @classmethod
    def _check_digest(cls, value: bytes) -> bytes:
        if len(value) != DIGEST_SIZE:
            raise ValueError(f"digest must be {DIGEST_SIZE} bytes, got {len(value)}")
        return value

    @field_validator("indices")
    @classmethod
    def _check_indices(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        for index in value:
            if index < 0 or index > MAX_INDEX:
                raise ValueError(f"line index out of u64 range: {index}")
        return value

    @property
    def full_sha256(self) -> str:
        return self.full_digest.hex()

    @property
    def redacted_sha256(self) -> str:
        return self.redacted_digest.hex()

    def index_set(self) -> set[int]:
        """Indices as a set, the form used for host-side cross-checks."""
        return set(self.indices)


def encode_journal(commitment: Commitment) -> bytes:
    """Serialize ``commitment`` in commit order."""
    parts = [
        commitment.full_digest,
        commitment.redacted_digest,
        _COUNT.pack(len(commitment.indices)),
    ]
    parts.extend(_INDEX.pack(index) for index in commitment.indices)
    return b"".join(parts)


def decode_journal(journal: bytes) -> Commitment:
    """Parse journal bytes produced by :func:`encode_journal`.

    Raises:
        JournalDecodeError: If the length or layout is wrong.
    """
    if len(journal) < _HEADER_SIZE:
        raise JournalDecodeError(
            f"journal too short: {len(journal)} bytes, need at least {_HEADER_SIZE}"
        )

    full_digest = journal[:DIGEST_SIZE]
    redacted_digest = journal[DIGEST_SIZE : 2 * DIGEST_SIZE]
    (count,) = _COUNT.unpack_from(journal, 2 * DIGEST_SIZE)

    expected = _HEADER_SIZE + count * _INDEX.size
    if len(journal) != expected:
        raise JournalDecodeError(
            f"journal length {len(journal)} does not match {count} indices (expected {expected})"
        )

    indices = tuple(
        _INDEX.unpack_from(journal, _HEADER_SIZE + i * _INDEX.size)[0] for i in range(count)
    )
    return Commitment(
        full_digest=full_digest,
        redacted_digest=redacted_digest,
        indices=indices,
    )
