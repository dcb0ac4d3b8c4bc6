from typing import Optional


class QuickCourtError(Exception):
    """Base class for booking and availability errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(QuickCourtError):
    """Operating hours are missing or malformed.

    Recovered locally by falling back to the default schedule; never
    reaches an HTTP client.
    """


class SelectionError(QuickCourtError):
    """The caller's date/slot/session selection cannot be submitted."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class SubmissionError(QuickCourtError):
    """The upstream API rejected the request or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def http_status(self) -> int:
        if self.status_code is not None and 400 <= self.status_code < 500:
            return self.status_code
        return 502
