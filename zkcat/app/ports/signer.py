"""Signer port interface for cryptographic signing."""

from typing import Protocol


class SignerPort(Protocol):
    """Port interface for cryptographic signing operations.

    Used by the attested engine to seal receipts.

    Side effects: None (pure computation).
    """

    def public_key(self) -> str:
        """Return the hex-encoded public key matching :meth:`sign`."""
        ...

    def sign(self, data: bytes) -> bytes:
        """Sign data.

        Args:
            data: Data to sign

        Returns:
            Signature bytes
        """
        ...

    def verify(self, data: bytes, signature: bytes, public_key: str) -> bool:
        """Verify signature.

        Args:
            data: Original data
            signature: Signature to verify
            public_key: Hex-encoded public key claimed by the signer

        Returns:
            True if signature is valid
        """
        ...
