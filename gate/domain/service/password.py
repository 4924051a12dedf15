"""Password hashing interface."""


class PasswordHasher:
    """One-way password hashing primitive.

    Implementations live in the adapter layer. Both operations may be slow by
    construction and must not block the event loop.
    """

    async def hash(self, plaintext: str) -> str:
        """Hash a plaintext password.

        Args:
            plaintext: Password as submitted by the user

        Returns:
            Self-describing digest suitable for storage
        """
        raise NotImplementedError

    async def verify(self, digest: str, plaintext: str) -> bool:
        """Check a plaintext password against a stored digest.

        Args:
            digest: Stored digest
            plaintext: Password as submitted by the user

        Returns:
            True if the password matches
        """
        raise NotImplementedError
