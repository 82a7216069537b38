"""Error types raised by the Comment Analyzer dispatcher."""

from perspective_api.core.errors import PerspectiveError

_RETRIABLE_CODES = frozenset({429, 500, 502, 503, 504})


class CommentsError(PerspectiveError):
    """Raised when the API answers with a structured ``error`` payload.

    `retriable` is informational; the client itself never retries.
    """

    def __init__(self, message: str, code: int) -> None:
        self.code = code
        super().__init__(message, retriable=code in _RETRIABLE_CODES)
