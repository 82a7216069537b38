"""HttpCommentsDispatcher: sends one Comment Analyzer request over requests."""

import time
from typing import Any

import requests

from perspective_api.comments.domain.observer import CommentsObserver
from perspective_api.comments.domain.operation import Operation
from perspective_api.comments.domain.request import CommentsRequest
from perspective_api.comments.domain.response import CommentsResponse
from perspective_api.comments.infrastructure.errors import CommentsError
from perspective_api.config.domain.client import ClientConfig

_HEADERS = {"content-type": "application/json", "Accept": "application/json"}


class HttpCommentsDispatcher:
    """Stateless between calls: each dispatch is one POST with no retry.

    The session is created on demand unless one is injected; an injected
    session is left open by `close()`.
    """

    def __init__(
        self,
        config: ClientConfig,
        observer: CommentsObserver,
        session: requests.Session | None = None,
    ) -> None:
        self._config = config
        self._observer = observer
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def url_for(self, operation: Operation) -> str:
        return f"{self._config.base_url}/comments:{operation.method}"

    def dispatch(
        self, operation: Operation, request: CommentsRequest
    ) -> CommentsResponse:
        """POST the fields of *request* that *operation* uses and wrap the reply.

        Raises:
            CommentsError: if the API answered with an ``error`` payload.
            requests.RequestException: for any other transport or HTTP failure,
                including a success body that is not JSON, unchanged.
        """
        body = request.body_for(operation=operation)
        self._observer.comments_request_started(
            method=operation.method, fields=list(body)
        )

        start = time.monotonic()
        try:
            response = self._session.post(
                self.url_for(operation=operation),
                params={"key": self._config.api_key},
                json=body,
                headers=_HEADERS,
                timeout=self._config.timeout_seconds,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            api_error = _api_error(exc)
            if api_error is None:
                self._observer.comments_request_failed(
                    method=operation.method, reason=type(exc).__name__
                )
                raise
            self._observer.comments_request_failed(
                method=operation.method, reason=api_error.message
            )
            raise api_error from exc

        duration_ms = int((time.monotonic() - start) * 1000)
        self._observer.comments_request_completed(
            method=operation.method,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        return CommentsResponse(data=data)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()


def _api_error(exc: requests.RequestException) -> CommentsError | None:
    """Rebuild the API's structured error from the failed response, if it has one."""
    response = exc.response
    if response is None:
        return None
    try:
        payload: Any = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if not isinstance(error, dict) or "message" not in error:
        return None
    code = error.get("code")
    if not isinstance(code, int):
        return None
    return CommentsError(message=str(error["message"]), code=code)
