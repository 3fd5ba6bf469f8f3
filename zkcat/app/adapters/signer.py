"""Ed25519 signer adapter."""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from zkcat.app.ports import SignerPort
from zkcat.utils.crypto import public_key_hex


class Ed25519Signer(SignerPort):
    """Sign with a raw Ed25519 private key and verify against raw public keys."""

    def __init__(self, private_key: bytes) -> None:
        self._private_key = Ed25519PrivateKey.from_private_bytes(private_key)
        self._public_key_hex = public_key_hex(private_key)

    def public_key(self) -> str:
        return self._public_key_hex

    def sign(self, data: bytes) -> bytes:
        return self._private_key.sign(data)

    def verify(self, data: bytes, signature: bytes, public_key: str) -> bool:
        try:
            key = Ed25519PublicKey.from_public_bytes(bytes.fromhex(public_key))
        except ValueError:
            return False

        try:
            key.verify(signature, data)
        except InvalidSignature:
            return False
        return True
