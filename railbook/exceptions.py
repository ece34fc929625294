"""Error types raised by the booking engine.

Domain errors derive from ``BookingError`` and are expected outcomes that the
API layer reports to the caller. ``StorageError`` signals a fault in the
record store itself and is never turned into a domain error.
"""


class BookingError(Exception):
    """Base class for all domain-level booking errors."""

    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(msg)


class NotFoundError(BookingError):
    """Raised when a referenced station, train or ticket does not exist."""


class UnAuthorizedError(BookingError):
    """Raised when the caller is not a registered admin."""


class InvalidInputError(BookingError):
    """Raised when a station name cannot be resolved."""


class AlreadyBookedError(BookingError):
    """Raised when the requested seat is not available."""


class TrainDepartedError(BookingError):
    """Raised when a refund is outside the allowed time window."""


class StorageError(Exception):
    """
    Raised when a record cannot be encoded, decoded or written.
    The current operation is aborted and its transaction rolled back.
    """
