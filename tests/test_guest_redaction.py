"""Tests for the guest redaction program."""

from __future__ import annotations

import hashlib

import pytest

from zkcat.guest import SENTINEL, compute, decode_journal, redact_text, split_lines
from zkcat.guest.redaction import RedactionInput, main


def sha(text: str) -> bytes:
    return hashlib.sha256(text.encode("utf-8")).digest()


DOCUMENT = "alpha\nbeta\ngamma"


def test_scenario_redacts_middle_line():
    commitment = compute(DOCUMENT, {1})

    assert redact_text(DOCUMENT, [1]).split("\n") == ["alpha", SENTINEL, "gamma"]
    assert commitment.full_digest == sha(DOCUMENT)
    assert commitment.redacted_digest == sha("alpha\n***REDACTED***\ngamma")
    assert commitment.indices == (1,)


def test_scenario_out_of_range_index_is_echoed_without_effect():
    commitment = compute(DOCUMENT, [5])

    assert commitment.redacted_digest == commitment.full_digest
    assert commitment.indices == (5,)


def test_compute_is_deterministic():
    first = compute(DOCUMENT, [2, 0])
    second = compute(DOCUMENT, [2, 0])

    assert first == second


def test_duplicate_indices_redact_once():
    once = compute(DOCUMENT, [1])
    twice = compute(DOCUMENT, [1, 1])

    assert once.redacted_digest == twice.redacted_digest
    # Requested indices are echoed verbatim, duplicates included.
    assert twice.indices == (1, 1)


@pytest.mark.parametrize("extra", [3, 4, 1000, 2**64 - 1])
def test_out_of_range_indices_do_not_change_redaction(extra: int):
    baseline = compute(DOCUMENT, [0])
    with_extra = compute(DOCUMENT, [0, extra])

    assert with_extra.redacted_digest == baseline.redacted_digest


def test_redacting_every_line_yields_only_sentinels():
    commitment = compute(DOCUMENT, range(3))

    assert commitment.redacted_digest == sha("\n".join([SENTINEL] * 3))


def test_empty_index_set_is_identity_for_plain_text():
    commitment = compute(DOCUMENT, [])

    assert commitment.redacted_digest == commitment.full_digest
    assert commitment.indices == ()


def test_indices_order_is_preserved():
    assert compute(DOCUMENT, [2, 0, 1]).indices == (2, 0, 1)


def test_main_commits_journal_bytes():
    journal = main(RedactionInput(DOCUMENT, (1,)))

    assert decode_journal(journal) == compute(DOCUMENT, [1])


class TestLineConvention:
    def test_empty_content_has_no_lines(self):
        assert split_lines("") == []
        commitment = compute("", [0])
        assert commitment.full_digest == sha("")
        assert commitment.redacted_digest == sha("")

    def test_trailing_newline_does_not_add_a_line(self):
        assert split_lines("alpha\nbeta\n") == ["alpha", "beta"]

    def test_trailing_newline_is_not_restored_in_redacted_content(self):
        content = "alpha\nbeta\n"
        commitment = compute(content, [])

        assert commitment.full_digest == sha(content)
        assert commitment.redacted_digest == sha("alpha\nbeta")
        assert commitment.redacted_digest != commitment.full_digest

    def test_blank_lines_are_lines(self):
        assert split_lines("a\n\nb") == ["a", "", "b"]
        assert redact_text("a\n\nb", [1]) == f"a\n{SENTINEL}\nb"

    def test_only_newlines(self):
        assert split_lines("\n\n") == ["", ""]

    def test_crlf_is_stripped_per_line(self):
        assert split_lines("alpha\r\nbeta\r\n") == ["alpha", "beta"]
        assert redact_text("alpha\r\nbeta", [0]) == f"{SENTINEL}\nbeta"

    def test_bare_carriage_return_inside_line_is_kept(self):
        assert split_lines("a\rb\nc") == ["a\rb", "c"]

    def test_final_carriage_return_without_newline_is_kept(self):
        assert split_lines("abc\r") == ["abc\r"]
        assert split_lines("a\r\nb\r") == ["a", "b\r"]
        assert redact_text("a\r\nb\r", []) == "a\nb\r"

    def test_unicode_separators_do_not_split(self):
        content = "one still one\x0cand more\ntwo"
        assert split_lines(content) == ["one still one\x0cand more", "two"]
