"""
Application Errors

NotFoundError is the only domain error raised by the use cases. Any other
failure (connectivity, constraint violations) propagates unmodified.
"""

from typing import Optional


class Error:
    """Machine-readable error code plus a human message"""

    def __init__(self, code: str, message: str, reason: Optional[str] = None):
        self.code = code
        self.message = message
        self.reason = reason

    def __repr__(self) -> str:
        return f"Error(code={self.code!r}, message={self.message!r})"


class NotFoundError(Exception):
    """Raised when a scoped lookup-by-id yields no row"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    @property
    def code(self) -> str:
        return self.base_error.code


def session_not_found() -> NotFoundError:
    return NotFoundError(Error("SESSION_NOT_FOUND", "Session not found"))


def log_not_found() -> NotFoundError:
    return NotFoundError(Error("LOG_NOT_FOUND", "Log entry not found"))
