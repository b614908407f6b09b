"""
notifykit exception hierarchy.

Every error raised by the package inherits from NotifyError.

Usage:
    try:
        EmailStrategy(address)
    except InvalidDestination as e:
        # Bad address at wiring time
    except NotifyError as e:
        # Any notifykit error
"""


class NotifyError(Exception):
    """Base exception for all notifykit errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigError(NotifyError):
    """Configuration is invalid, missing, or malformed."""

    pass


class InvalidDestination(NotifyError):
    """A delivery strategy was given an empty or malformed destination."""

    def __init__(
        self,
        message: str,
        channel: str = "",
        destination: str = "",
        details: dict | None = None,
    ):
        self.channel = channel
        self.destination = destination
        super().__init__(message, details)


class ServiceError(NotifyError):
    """The process-wide NotificationService was installed twice or never."""

    pass
