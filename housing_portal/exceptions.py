"""
Error types raised by the pending-entry workflow and its stores.
"""


class PortalError(Exception):
    """Base exception for portal errors."""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(PortalError):
    """Requested entity is absent."""
    status_code = 404
    default_message = "Not found"


class OriginalNotFound(NotFound):
    """Update entry references a beneficiary that does not exist."""
    default_message = "Original beneficiary not found"


class MalformedInput(PortalError):
    """Submission payload is not a well-formed record."""
    status_code = 400
    default_message = "Malformed input"


class StoreUnavailable(PortalError):
    """Underlying persistence is unreachable."""
    status_code = 503
    default_message = "Store unavailable"


class AddFailed(PortalError):
    """Officer could not be added."""
    default_message = "Failed to add officer"


class RemoveFailed(PortalError):
    """Officer could not be removed."""
    default_message = "Failed to remove officer"
