"""Exception hierarchy for add-to-calendar operations."""


class AddToCalendarError(Exception):
    """Base exception for add-to-calendar operations."""

    pass


class ConfigurationError(AddToCalendarError):
    """Invalid configuration value."""

    pass


class DeliveryError(AddToCalendarError):
    """Payload could not be handed to the platform."""

    pass


class ShareRejectedError(DeliveryError):
    """Native share was cancelled by the user or refused by the platform."""

    pass
