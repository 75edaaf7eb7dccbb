"""Custom application exceptions."""


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500):
        """Initialize exception with message and status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class UpstreamServiceException(AppException):
    """A third-party API could not be reached or returned unusable data."""

    def __init__(self, service: str, message: str = "Upstream service unavailable"):
        """Initialize with 503 status code."""
        self.service = service
        super().__init__(f"{service}: {message}", status_code=503)
