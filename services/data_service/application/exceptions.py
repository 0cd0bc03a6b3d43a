"""Exceptions raised by the data service and the status each maps to."""

from typing import Any, Dict, Optional


class DataServiceError(Exception):
    """Base error of the data service; unexpected failures map to 500."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(DataServiceError):
    status_code = 404

    def __init__(self, resource: str, field: str, value: Any):
        super().__init__(f"{resource} not found with {field}: {value}")
        self.resource = resource
        self.field = field
        self.value = value


class DuplicateResourceError(DataServiceError):
    status_code = 409

    def __init__(self, resource: str, field: str, value: Any):
        super().__init__(f"{resource} already exists with {field}: {value}")
        self.resource = resource
        self.field = field
        self.value = value


class DataIntegrityError(DataServiceError):
    """A write was rejected by a database constraint."""

    status_code = 409


class ValidationError(DataServiceError):
    status_code = 400

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.errors: Dict[str, str] = dict(errors or {})

    def add_error(self, field: str, message: str) -> "ValidationError":
        self.errors[field] = message
        return self

