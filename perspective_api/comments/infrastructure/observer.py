"""Structlog implementation of the CommentsObserver port."""

import structlog


class StructlogCommentsObserver:
    """Delegates request dispatch events to structlog.

    Satisfies the CommentsObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def comments_request_started(self, method: str, fields: list[str]) -> None:
        self._log.info("comments.request_started", method=method, fields=fields)

    def comments_request_completed(
        self, method: str, status_code: int, duration_ms: int
    ) -> None:
        self._log.info(
            "comments.request_completed",
            method=method,
            status_code=status_code,
            duration_ms=duration_ms,
        )

    def comments_request_failed(self, method: str, reason: str) -> None:
        self._log.error("comments.request_failed", method=method, reason=reason)
