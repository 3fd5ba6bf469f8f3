"""Error taxonomy for proof generation and verification.

Every error carries the pipeline phase that raised it so callers can report
where a run stopped. None of these are retried.
"""

from __future__ import annotations

from typing import Literal

Phase = Literal["read", "prove", "cross-check", "verify", "persist"]


class ZkcatError(Exception):
    """Base class for all protocol failures."""

    def __init__(self, message: str, *, phase: Phase) -> None:
        super().__init__(message)
        self.phase: Phase = phase

    def __str__(self) -> str:
        return f"[{self.phase}] {super().__str__()}"


class IoError(ZkcatError):
    """File missing, unreadable, not valid UTF-8, or not writable."""


class EngineError(ZkcatError):
    """The computation engine failed to prove, or its proof failed self-verification."""


class ConsistencyError(ZkcatError):
    """The engine's commitment disagrees with what the host computed or requested."""


class VerificationError(ZkcatError):
    """A stored proof artifact was rejected during independent verification."""
