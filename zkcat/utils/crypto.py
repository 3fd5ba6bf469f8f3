"""Utilities for receipt key management."""

from __future__ import annotations

import os
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

ED25519_KEY_LENGTH = 32


def _write_secure_file(path: Path, data: bytes, *, mode: int = 0o600) -> None:
    """Write ``data`` to ``path`` and restrict permissions.

    Args:
        path: Target file path
        data: Bytes to persist
        mode: File mode to apply (POSIX style)
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    try:
        os.write(fd, data)
    finally:
        os.close(fd)

    try:
        os.chmod(path, mode)
    except PermissionError:
        # Windows may not support POSIX-style chmod; best effort only.
        pass


def load_or_create_ed25519_key(path: Path) -> bytes:
    """Load a raw Ed25519 private key from ``path`` or create a new one.

    Returns:
        The 32 raw private key bytes.

    Raises:
        ValueError: If the file exists but does not hold a 32-byte key.
    """
    try:
        key = path.read_bytes()
    except FileNotFoundError:
        private_key = Ed25519PrivateKey.generate()
        key = private_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )
        _write_secure_file(path, key)
        return key

    if len(key) != ED25519_KEY_LENGTH:
        raise ValueError(f"Signing key at {path} is not a raw {ED25519_KEY_LENGTH}-byte Ed25519 key")
    return key


def public_key_bytes(private_key: bytes) -> bytes:
    """Derive the raw public key for a raw Ed25519 private key."""
    public_key = Ed25519PrivateKey.from_private_bytes(private_key).public_key()
    return public_key.public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


def public_key_hex(private_key: bytes) -> str:
    """Hex form of :func:`public_key_bytes`, as shared with verifiers."""
    return public_key_bytes(private_key).hex()
