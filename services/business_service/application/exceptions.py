"""Business service exceptions, each carrying the HTTP status it is reported with."""


class DataServiceError(Exception):
    """A data service call failed; ``status_code`` is what the client sees."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ResourceNotFoundError(DataServiceError):
    def __init__(self, message: str):
        super().__init__(message, 404)


class BadRequestError(DataServiceError):
    def __init__(self, message: str):
        super().__init__(message, 400)


class ServiceUnavailableError(DataServiceError):
    def __init__(self, message: str = "Data service is unavailable"):
        super().__init__(message, 503)
