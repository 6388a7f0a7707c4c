"""Error types raised by the match engine and its service boundary."""


class MatchEngineError(Exception):
    """Base class for match engine failures."""


class InvalidInputError(MatchEngineError, ValueError):
    """Raised when a pipeline input is missing or not text.

    Attributes:
        field: Name of the offending input
        received: Type name of the value that was passed
    """

    def __init__(self, field: str, received: object):
        self.field = field
        self.received = type(received).__name__
        super().__init__(f"{field} must be a string, got {self.received}")


class ProfileNotFoundError(MatchEngineError, LookupError):
    """Raised when a resume profile does not exist for the requesting user."""

    def __init__(self, resume_id: str, user_id: str | None = None):
        self.resume_id = resume_id
        self.user_id = user_id
        message = f"Resume profile not found: {resume_id}"
        if user_id is not None:
            message += f" (user {user_id})"
        super().__init__(message)
