"""Pytest configuration and fixtures."""

import gc
import shutil
import tempfile
import time
from collections.abc import Generator
from pathlib import Path

import pytest

from zkcat.bootstrap import ApplicationContainer, bootstrap_application
from zkcat.config import Settings


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    try:
        yield Path(tmpdir)
    finally:
        # Force garbage collection to release any file handles
        gc.collect()
        # Small delay to allow OS to release file locks
        time.sleep(0.1)
        shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def sample_document(temp_dir: Path) -> Path:
    """Three-line document without a trailing newline."""
    file_path = temp_dir / "sample.txt"
    file_path.write_bytes(b"alpha\nbeta\ngamma")
    return file_path


@pytest.fixture
def override_settings(temp_dir: Path) -> Generator[Settings, None, None]:
    """Provide isolated zkcat settings scoped to tests."""

    import zkcat.config as config_module

    original_settings = getattr(config_module, "_settings", None)

    config_dir = temp_dir / "appconfig"
    config_dir.mkdir(parents=True, exist_ok=True)

    settings = config_module.Settings(config_dir=config_dir)

    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings


@pytest.fixture
def container(override_settings: Settings) -> ApplicationContainer:
    """Fully wired application using the local attestation engine."""
    return bootstrap_application(override_settings)
