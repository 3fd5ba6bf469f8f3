"""zkcat CLI application with Typer."""

import logging
import time
from pathlib import Path
from typing import Annotated

import typer

from zkcat import __version__
from zkcat.app import ProofResult
from zkcat.bootstrap import ApplicationContainer, bootstrap_application
from zkcat.config import get_settings, set_settings
from zkcat.errors import ZkcatError
from zkcat.guest import SENTINEL, Commitment
from zkcat.utils.cli_output import commitment_payload, json_response

app = typer.Typer(
    name="zkcat",
    help="Zero-knowledge file viewer with redaction proofs",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"zkcat version {__version__}")
        raise typer.Exit()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _print_commitment(commitment: Commitment) -> None:
    typer.echo(f"- Full file SHA-256 hash: {commitment.full_sha256}")
    typer.echo(f"- Redacted file SHA-256 hash: {commitment.redacted_sha256}")
    typer.echo(f"- Redacted line indices: {list(commitment.indices)}")


def _run_prove(
    container: ApplicationContainer,
    file: Path,
    redact: str | None,
    output: Path | None,
    *,
    json_output: bool,
    stats: bool,
) -> None:
    started = time.perf_counter()
    result: ProofResult = container.prover_service.generate_proof(
        file.expanduser(),
        redact,
        output=output.expanduser() if output is not None else None,
    )
    elapsed = time.perf_counter() - started

    if json_output:
        extra: dict[str, object] = {}
        if stats:
            extra["elapsed_seconds"] = round(elapsed, 6)
        typer.echo(
            json_response(
                "proof_generated",
                1,
                **commitment_payload(result.commitment),
                image_id=result.image_id,
                proof_path=str(result.proof_path),
                redacted_path=str(result.redacted_path) if result.redacted_path else None,
                **extra,
            )
        )
        return

    for line in result.redacted_lines:
        if line == SENTINEL:
            typer.secho(line, fg=typer.colors.RED)
        else:
            typer.secho(line, fg=typer.colors.GREEN)

    typer.echo()
    typer.secho("✓ Proof generated and verified!", fg=typer.colors.GREEN)
    _print_commitment(result.commitment)
    typer.echo(f"Proof saved to: {result.proof_path}")
    if result.redacted_path is not None:
        typer.echo(f"Redacted text saved to: {result.redacted_path}")
    if stats:
        typer.echo(f"Elapsed: {elapsed:.3f}s")


def _run_verify(
    container: ApplicationContainer,
    artifact: Path,
    *,
    json_output: bool,
    stats: bool,
) -> None:
    started = time.perf_counter()
    commitment = container.verifier_service.verify_proof(artifact.expanduser())
    elapsed = time.perf_counter() - started

    if json_output:
        extra: dict[str, object] = {}
        if stats:
            extra["elapsed_seconds"] = round(elapsed, 6)
        typer.echo(
            json_response(
                "proof_verified",
                1,
                **commitment_payload(commitment),
                image_id=container.verifier_service.program.image_id,
                **extra,
            )
        )
        return

    typer.secho("✓ Proof verified successfully!", fg=typer.colors.GREEN)
    _print_commitment(commitment)
    if stats:
        typer.echo(f"Elapsed: {elapsed:.3f}s")


@app.command()
def main(
    file: Annotated[
        Path | None,
        typer.Argument(help="Document to prove, or proof artifact with --verify"),
    ] = None,
    redact: Annotated[
        str | None,
        typer.Option(
            "--redact",
            "-r",
            help="Comma-separated zero-based line indices to redact (e.g. 0,3,7)",
        ),
    ] = None,
    verify: Annotated[
        bool,
        typer.Option("--verify", "-v", help="Treat FILE as a proof artifact and verify it"),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Also write the redacted text to this path"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
    stats: Annotated[
        bool,
        typer.Option("--stats", help="Report elapsed time"),
    ] = False,
    show_key: Annotated[
        bool,
        typer.Option("--show-key", help="Print the public key receipts are sealed with and exit"),
    ] = False,
    config_dir: Annotated[
        Path | None,
        typer.Option("--config-dir", help="Override config directory"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging"),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Prove what a redacted file hashes to, or verify such a proof."""

    settings = get_settings()
    if config_dir:
        settings.config_dir = config_dir
    set_settings(settings)
    _configure_logging("DEBUG" if verbose else settings.log_level)

    if not show_key and file is None:
        raise typer.BadParameter("FILE is required", param_hint="FILE")

    if verify and (redact is not None or output is not None):
        raise typer.BadParameter("--redact and --output cannot be combined with --verify")

    try:
        container = bootstrap_application(settings)
        if show_key:
            typer.echo(container.signer.public_key())
            return

        if verify:
            _run_verify(container, file, json_output=json_output, stats=stats)
        else:
            _run_prove(
                container,
                file,
                redact,
                output,
                json_output=json_output,
                stats=stats,
            )
    except ZkcatError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
