"""Domain exceptions raised by repositories and services.

Controllers translate these into HTTP responses; nothing below this
layer knows about status codes.
"""


class CentralError(Exception):
    """Base class for errors raised by the central API."""


class RecordNotFoundError(CentralError):
    """The record addressed by the request does not exist."""

    def __init__(self, label: str, record_id):
        super().__init__(f"No {label} found with id {record_id}.")
        self.label = label
        self.record_id = record_id


class ParentNotFoundError(CentralError):
    """A record references a parent that does not exist."""

    def __init__(self, label: str, record_id):
        super().__init__(f"{label.capitalize()} {record_id} not found in the database.")
        self.label = label
        self.record_id = record_id


class RecordValidationError(CentralError, ValueError):
    """The record cannot be stored as given (missing required fields, bad references)."""


class ReferentialIntegrityError(CentralError):
    """The database rejected a delete because other records still reference the row."""


class UnauthorizedAccessError(CentralError):
    """The caller is not allowed to reach the requested resource."""
