"""
Exceptions raised by the FeatureFence diagnostic gateway.
"""


class FeatureFenceError(Exception):
    """Base exception class for all FeatureFence errors."""
    pass


class InvalidInput(FeatureFenceError):
    """Raised when a lint request is missing code or carries bad options."""
    pass


class PayloadTooLarge(InvalidInput):
    """Raised when the submitted code exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Code is too large ({size} characters, limit {limit})")


class AnalyzerFailure(FeatureFenceError):
    """Raised when an analyzer crashes while processing a request."""

    def __init__(self, language: str, cause: BaseException = None):
        self.language = language
        self.cause = cause
        super().__init__(f"Analyzer for '{language}' failed")


class MalformedTarget(FeatureFenceError):
    """Raised for a target query token that cannot be parsed or matched.

    Never fatal: the resolver skips the token and records an annotation.
    """

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"Ignored target '{token}': {reason}")


class DataLoadError(FeatureFenceError):
    """Raised when a bundled data file is missing or malformed."""

    def __init__(self, message: str, file_path: str = None):
        self.file_path = file_path

        if file_path:
            message = f"Data error in '{file_path}': {message}"

        super().__init__(message)
