"""
Domain exceptions raised by the persistence layer and services.
"""


class VehicleRegistryError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(VehicleRegistryError):
    """The targeted record does not exist."""


class AlreadyDeletedError(NotFoundError):
    """A delete affected zero rows after the existence check passed."""


class ConflictError(VehicleRegistryError):
    """A uniqueness constraint would be violated."""


class ValidationFailedError(VehicleRegistryError):
    """Input is malformed or refers to something invalid."""


class MissingReferenceError(ValidationFailedError):
    """A foreign key points to a record that does not exist."""


class StorageFaultError(VehicleRegistryError):
    """Unexpected backend failure. The message is never shown to clients."""
