"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class NotificationError(AdapterError):
    """Outbound notification could not be delivered."""

    pass


class PasswordHashingError(AdapterError):
    """Password digest could not be produced or checked."""

    pass
