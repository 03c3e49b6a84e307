"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails (missing or non-numeric fields)."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class RateUnavailableError(AppError):
    """Raised when no exchange rate exists for the requested date."""

    def __init__(self, date: str):
        self.date = date
        super().__init__(
            f"Exchange rate not available for {date}. Please select a different date.",
            code="RATE_UNAVAILABLE",
        )


class ResourceLoadError(AppError):
    """Raised when the exchange-rate resource cannot be fetched or parsed."""

    def __init__(self, message: str):
        super().__init__(message, code="RESOURCE_LOAD_FAILURE")
