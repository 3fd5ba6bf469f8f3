"""Application bootstrap wiring ports, adapters, and services."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from zkcat.app import ProverService, VerifierService
from zkcat.app.adapters import (
    Ed25519Signer,
    FileSystemStorageAdapter,
    LocalAttestationEngine,
    TimeoutEngine,
)
from zkcat.app.ports import ProverEnginePort, SignerPort, StoragePort
from zkcat.config import Settings, get_settings
from zkcat.errors import IoError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplicationContainer:
    """Aggregates wired services and adapters for the CLI layer."""

    settings: Settings
    engine: ProverEnginePort
    signer: SignerPort
    storage_port: StoragePort
    prover_service: ProverService
    verifier_service: VerifierService


def create_engine(settings: Settings, signer: SignerPort) -> ProverEnginePort:
    """Build the engine handle described by ``settings``."""

    engine: ProverEnginePort = LocalAttestationEngine(
        signer,
        trusted_keys=settings.get_trusted_public_keys(),
    )
    if settings.prove_timeout_seconds is not None:
        logger.debug("Proving deadline set to %ss", settings.prove_timeout_seconds)
        engine = TimeoutEngine(engine, settings.prove_timeout_seconds)
    return engine


def bootstrap_application(
    settings: Settings | None = None,
    *,
    engine: ProverEnginePort | None = None,
) -> ApplicationContainer:
    """Instantiate adapters and services for CLI consumption.

    Passing ``engine`` replaces the configured engine (e.g. an external
    proving backend or a test double).
    """

    active_settings = settings or get_settings()

    storage = FileSystemStorageAdapter()
    try:
        signing_key = active_settings.get_signing_key()
    except (OSError, ValueError) as exc:
        raise IoError(f"Failed to load signing key: {exc}", phase="read") from exc
    signer = Ed25519Signer(signing_key)
    active_engine = engine or create_engine(active_settings, signer)

    prover_service = ProverService(
        engine=active_engine,
        storage_port=storage,
        settings=active_settings,
    )
    verifier_service = VerifierService(engine=active_engine, storage_port=storage)

    return ApplicationContainer(
        settings=active_settings,
        engine=active_engine,
        signer=signer,
        storage_port=storage,
        prover_service=prover_service,
        verifier_service=verifier_service,
    )
