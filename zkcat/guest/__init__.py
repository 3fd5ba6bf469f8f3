"""Guest programs executed under the computation engine.

Modules in this package must stay pure and deterministic: their source bytes
form the program identity that receipts are bound to.
"""

from zkcat.guest.journal import Commitment, JournalDecodeError, decode_journal, encode_journal
from zkcat.guest.redaction import (
    SENTINEL,
    RedactionInput,
    compute,
    redact_lines,
    redact_text,
    split_lines,
)

__all__ = [
    "Commitment",
    "JournalDecodeError",
    "RedactionInput",
    "SENTINEL",
    "compute",
    "decode_journal",
    "encode_journal",
    "redact_lines",
    "redact_text",
    "split_lines",
]
