"""Exception taxonomy for sanitization runs."""

from typing import Optional


class SanitizerError(Exception):
    """Base class for sanitizer failures."""


class InputError(SanitizerError, ValueError):
    """Invalid invocation; raised before any record is touched."""


class UserNotFoundError(InputError):
    """An exclusion token matched no user."""

    def __init__(self, token: str, lookup: str):
        self.token = token
        self.lookup = lookup
        super().__init__(f"user {lookup} to keep not found: {token}")


class LoginExhaustedError(SanitizerError, RuntimeError):
    """No unused login was found within the attempt limit."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"Unable to find a fake username that was not already in use after {attempts} attempts"
        )


class RecordNotFoundError(SanitizerError, LookupError):
    """A record (or the content it belongs to) vanished before it could be updated."""

    def __init__(self, kind: str, record_id: int, detail: Optional[str] = None):
        self.kind = kind
        self.record_id = record_id
        message = f"{kind} {record_id} not found"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
