"""Custom exception hierarchy for estate-sim."""


class EstateSimError(Exception):
    """Base exception for all estate-sim errors."""


class EntityNotFoundError(EstateSimError):
    """Raised when a referenced entity does not exist."""


class PropertyNotFoundError(EntityNotFoundError):
    """Raised when a property id is not in the world."""


class EventNotFoundError(EntityNotFoundError):
    """Raised when an event instance id is not in the event log."""


class InvalidEntityStateError(EstateSimError):
    """Raised when an entity is in an invalid state for the operation."""


class InvalidLocationError(EstateSimError):
    """Raised when a pricing model receives a location it does not know."""


class ConfigurationError(EstateSimError):
    """Raised when configuration is invalid or missing."""


class CommandRejectedError(EstateSimError):
    """Raised when a player command fails validation.

    The message is the user-visible rejection reason.
    """
