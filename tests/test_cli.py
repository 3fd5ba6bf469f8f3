"""CLI integration smoke tests."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from typer.testing import CliRunner

from zkcat.app.programs import REDACTION_PROGRAM
from zkcat.cli import app
from zkcat.guest import SENTINEL, compute

runner = CliRunner()


def test_cli_prove_prints_redacted_lines_and_saves_proof(
    sample_document: Path, override_settings
) -> None:
    result = runner.invoke(app, [str(sample_document), "--redact", "1"])

    assert result.exit_code == 0, result.output
    assert "alpha" in result.stdout
    assert SENTINEL in result.stdout
    assert "beta" not in result.stdout.splitlines()
    assert "Proof generated and verified" in result.stdout
    assert compute("alpha\nbeta\ngamma", [1]).redacted_sha256 in result.stdout
    assert "Redacted line indices: [1]" in result.stdout
    assert Path(f"{sample_document}.proof").exists()


def test_cli_verify_round_trip(sample_document: Path, override_settings) -> None:
    runner.invoke(app, [str(sample_document), "-r", "0,2"])

    result = runner.invoke(app, [f"{sample_document}.proof", "--verify"])

    assert result.exit_code == 0, result.output
    assert "Proof verified successfully" in result.stdout
    assert "Redacted line indices: [0, 2]" in result.stdout


def test_cli_json_output(sample_document: Path, override_settings) -> None:
    result = runner.invoke(app, [str(sample_document), "--redact", "1,9", "--json", "--stats"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    expected = compute("alpha\nbeta\ngamma", [1, 9])
    assert payload["schema_id"] == "proof_generated"
    assert payload["schema_version"] == 1
    assert payload["producer"].startswith("zkcat-")
    datetime.fromisoformat(payload["produced_at"])
    assert payload["full_sha256"] == expected.full_sha256
    assert payload["redacted_sha256"] == expected.redacted_sha256
    assert payload["redacted_indices"] == [1, 9]
    assert payload["image_id"] == REDACTION_PROGRAM.image_id
    assert payload["proof_path"] == f"{sample_document}.proof"
    assert "elapsed_seconds" in payload

    verified = runner.invoke(app, [f"{sample_document}.proof", "--verify", "--json"])
    verified_payload = json.loads(verified.stdout)
    assert verified_payload["schema_id"] == "proof_verified"
    assert verified_payload["redacted_sha256"] == expected.redacted_sha256


def test_cli_output_writes_redacted_file(
    sample_document: Path, temp_dir: Path, override_settings
) -> None:
    destination = temp_dir / "redacted.txt"

    result = runner.invoke(app, [str(sample_document), "-r", "2", "-o", str(destination)])

    assert result.exit_code == 0, result.output
    assert destination.read_text(encoding="utf-8") == f"alpha\nbeta\n{SENTINEL}"


def test_cli_missing_file_exits_nonzero(temp_dir: Path, override_settings) -> None:
    result = runner.invoke(app, [str(temp_dir / "nope.txt")])

    assert result.exit_code == 1
    assert "Failed to read input file" in result.output


def test_cli_rejects_corrupt_proof(temp_dir: Path, override_settings) -> None:
    artifact = temp_dir / "bad.proof"
    artifact.write_text("{}", encoding="utf-8")

    result = runner.invoke(app, [str(artifact), "--verify"])

    assert result.exit_code == 1
    assert "Failed to deserialize proof" in result.output


def test_cli_requires_file(override_settings) -> None:
    result = runner.invoke(app, [])

    assert result.exit_code == 2


def test_cli_show_key(override_settings) -> None:
    result = runner.invoke(app, ["--show-key"])

    assert result.exit_code == 0
    assert len(result.stdout.strip()) == 64


def test_cli_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "zkcat version" in result.stdout


def test_cli_corrupt_signing_key_exits_with_error(
    sample_document: Path, override_settings
) -> None:
    (override_settings.get_config_dir() / "receipt-signing.key").write_bytes(b"abc")

    result = runner.invoke(app, [str(sample_document)])

    assert result.exit_code == 1
    assert "Failed to load signing key" in result.output
    assert not Path(f"{sample_document}.proof").exists()
