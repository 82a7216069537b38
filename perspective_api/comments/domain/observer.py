"""CommentsObserver port: domain events emitted around Comment Analyzer calls."""

from typing import Protocol


class CommentsObserver(Protocol):
    """Observer port for request dispatch events.

    Implementations may log to structlog or record for tests.
    """

    def comments_request_started(self, method: str, fields: list[str]) -> None: ...

    def comments_request_completed(
        self, method: str, status_code: int, duration_ms: int
    ) -> None: ...

    def comments_request_failed(self, method: str, reason: str) -> None: ...
