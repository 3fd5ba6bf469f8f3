"""Parsing of ``--redact`` line index lists."""

from __future__ import annotations

import logging
import re

from zkcat.guest.journal import MAX_INDEX

logger = logging.getLogger(__name__)

_INDEX_TOKEN = re.compile(r"\+?[0-9]+")


def parse_redaction_indices(raw: str | None) -> list[int]:
    """Parse a comma-separated list of zero-based line indices.

    Parsing is lenient: tokens that are not non-negative base-10 integers
    within u64 range (an optional leading "+" is accepted) are skipped rather
    than failing the request. Order and duplicates are preserved.

    Example:
        >>> parse_redaction_indices("1, 3,x,-2,3")
        [1, 3, 3]
    """
    if not raw:
        return []

    indices: list[int] = []
    for token in raw.split(","):
        candidate = token.strip()
        if not _INDEX_TOKEN.fullmatch(candidate):
            logger.debug("Skipping unparsable redaction index %r", token)
            continue
        value = int(candidate)
        if value > MAX_INDEX:
            logger.debug("Skipping redaction index %s beyond u64 range", candidate)
            continue
        indices.append(value)
    return indices
