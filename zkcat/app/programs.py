"""Guest programs known to the host, with their fixed identities."""

from __future__ import annotations

from zkcat.app.ports import Program
from zkcat.guest import journal, redaction

REDACTION_PROGRAM = Program.from_module("redaction", redaction, includes=(journal,))
