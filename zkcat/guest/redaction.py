"""Guest redaction program.

Runs inside the computation engine. Given the private document content and
the requested line indices it commits the digest of the content, the digest
of the redacted content, and the indices as requested.

Line convention, shared with every host-side echo of the redaction:

* content is split on ``"\\n"``;
* a final empty segment (empty content, or content ending in ``"\\n"``) is
  not a line;
* one trailing ``"\\r"`` is stripped from each line;
* redacted lines are rejoined with ``"\\n"`` and no trailing newline.

``str.splitlines`` is not used: it also breaks on form feeds, ``\\x1c`` and
Unicode line separators, which would shift indices.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from zkcat.guest.journal import Commitment, encode_journal

SENTINEL = "***REDACTED***"


@dataclass(frozen=True, slots=True)
class RedactionInput:
    """Private input handed to the guest."""

    content: str
    indices: tuple[int, ...] = ()


def split_lines(content: str) -> list[str]:
    """Split ``content`` into lines using the guest's line convention."""
    if not content:
        return []

    *terminated, tail = content.split("\n")
    lines = [segment[:-1] if segment.endswith("\r") else segment for segment in terminated]
    # A "\r" is only part of a line ending when "\n" follows it.
    if tail:
        lines.append(tail)
    return lines


def redact_lines(lines: Sequence[str], indices: Iterable[int]) -> list[str]:
    """Return a copy of ``lines`` with every in-range index replaced by :data:`SENTINEL`.

    Out-of-range indices are ignored; duplicates have no extra effect.
    """
    redacted = list(lines)
    for index in indices:
        if 0 <= index < len(redacted):
            redacted[index] = SENTINEL
    return redacted


def redact_text(content: str, indices: Iterable[int]) -> str:
    """Redacted content exactly as the guest hashes it."""
    return "\n".join(redact_lines(split_lines(content), indices))


def compute(content: str, indices: Iterable[int]) -> Commitment:
    """Compute the public commitment for ``content`` redacted at ``indices``."""
    requested = tuple(indices)

    full_digest = hashlib.sha256(content.encode("utf-8")).digest()
    redacted_content = redact_text(content, requested)
    redacted_digest = hashlib.sha256(redacted_content.encode("utf-8")).digest()

    return Commitment(
        full_digest=full_digest,
        redacted_digest=redacted_digest,
        indices=requested,
    )


def main(private_input: RedactionInput) -> bytes:
    """Guest entrypoint: read private input, commit the journal."""
    return encode_journal(compute(private_input.content, private_input.indices))
