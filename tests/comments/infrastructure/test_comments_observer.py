"""Tests for StructlogCommentsObserver."""

from structlog.testing import capture_logs

from perspective_api.comments.infrastructure.observer import StructlogCommentsObserver


class TestStructlogCommentsObserver:
    """Each domain event becomes one structlog entry with its data as keys."""

    def test_request_started_logs_info(self) -> None:
        with capture_logs() as logs:
            StructlogCommentsObserver().comments_request_started(
                method="analyze", fields=["comment"]
            )

        assert logs == [
            {
                "event": "comments.request_started",
                "log_level": "info",
                "method": "analyze",
                "fields": ["comment"],
            }
        ]

    def test_request_completed_logs_info(self) -> None:
        with capture_logs() as logs:
            StructlogCommentsObserver().comments_request_completed(
                method="analyze", status_code=200, duration_ms=12
            )

        assert logs[0]["event"] == "comments.request_completed"
        assert logs[0]["status_code"] == 200
        assert logs[0]["duration_ms"] == 12

    def test_request_failed_logs_error(self) -> None:
        with capture_logs() as logs:
            StructlogCommentsObserver().comments_request_failed(
                method="suggestscore", reason="Comment too long"
            )

        assert logs[0]["log_level"] == "error"
        assert logs[0]["reason"] == "Comment too long"
