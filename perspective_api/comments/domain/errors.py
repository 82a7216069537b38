"""Error types raised while assembling Comment Analyzer requests."""

from perspective_api.core.errors import PerspectiveError


class RequestFieldError(PerspectiveError):
    """Raised when a setter receives a value of the wrong shape for its field."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        super().__init__(f"Failed to set request field '{field}': {reason}")
