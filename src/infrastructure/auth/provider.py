"""Authentication provider protocols."""

from typing import Protocol

from domain.entities.identity import Identity


class ITokenService(Protocol):
    """Protocol for identity token issuers."""

    def issue(self, identity: Identity) -> str:
        """
        Create a signed, expiring token for an identity.

        Args:
            identity: The identity to embed in the token

        Returns:
            The encoded token string

        Raises:
            SigningError: If the token cannot be signed
        """
        ...

    def verify(self, token: str) -> Identity:
        """
        Verify a token and extract its identity.

        Args:
            token: The token presented by the caller

        Returns:
            The identity carried by the token

        Raises:
            InvalidTokenError: If the signature, payload or expiry is bad
        """
        ...


class IPasswordHasher(Protocol):
    """Protocol for one-way password hashing."""

    def hash(self, password: str) -> str:
        """Hash a plaintext password."""
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash."""
        ...
