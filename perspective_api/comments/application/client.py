"""CommentsClient: setter-based facade over the request builder and dispatcher."""

from types import TracebackType
from typing import Any, Self

import requests
from pydantic import ValidationError

from perspective_api.comments.domain.fields import (
    AttributeName,
    AttributeRequest,
    AttributeScore,
    Comment,
    Context,
)
from perspective_api.comments.domain.observer import CommentsObserver
from perspective_api.comments.domain.operation import ANALYZE, SUGGEST_SCORE
from perspective_api.comments.domain.request import (
    CommentsRequest,
    CommentsRequestBuilder,
)
from perspective_api.comments.domain.response import CommentsResponse
from perspective_api.comments.infrastructure.dispatcher import HttpCommentsDispatcher
from perspective_api.comments.infrastructure.observer import StructlogCommentsObserver
from perspective_api.config.domain.client import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    ClientConfig,
)
from perspective_api.config.infrastructure.errors import ConfigValidationError


class CommentsClient:
    """Client for the Comment Analyzer API.

    Fields set through the setters persist on the instance and are shared by
    `analyze()` and `suggest_score()`; each call sends a snapshot of them. Use
    a fresh client when one call's fields must not carry over to the next.
    Not safe for concurrent use from several threads.

    Example::

        client = CommentsClient("API_KEY")
        client.comment({"text": "hello", "type": "PLAIN_TEXT"})
        client.requested_attributes({"TOXICITY": {}})
        client.analyze().summary_score("TOXICITY")
    """

    def __init__(
        self,
        api_key: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        base_url: str = DEFAULT_BASE_URL,
        observer: CommentsObserver | None = None,
        session: requests.Session | None = None,
    ) -> None:
        try:
            config = ClientConfig(
                api_key=api_key, base_url=base_url, timeout_seconds=timeout_seconds
            )
        except ValidationError as exc:
            raise ConfigValidationError(str(exc), source="arguments") from exc
        self._builder = CommentsRequestBuilder()
        self._dispatcher = HttpCommentsDispatcher(
            config=config,
            observer=observer if observer is not None else StructlogCommentsObserver(),
            session=session,
        )

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        observer: CommentsObserver | None = None,
        session: requests.Session | None = None,
    ) -> Self:
        return cls(
            api_key=config.api_key,
            timeout_seconds=config.timeout_seconds,
            base_url=config.base_url,
            observer=observer,
            session=session,
        )

    # -- operations ---------------------------------------------------------

    def analyze(self) -> CommentsResponse:
        """Make an AnalyzeComment request.

        Raises:
            CommentsError: if the API returned a structured error.
            requests.RequestException: on any other transport failure.
        """
        return self._dispatcher.dispatch(operation=ANALYZE, request=self.snapshot())

    def suggest_score(self) -> CommentsResponse:
        """Send score feedback through a SuggestCommentScore request.

        Raises:
            CommentsError: if the API returned a structured error.
            requests.RequestException: on any other transport failure.
        """
        return self._dispatcher.dispatch(
            operation=SUGGEST_SCORE, request=self.snapshot()
        )

    def snapshot(self) -> CommentsRequest:
        """Return the immutable request built from the fields set so far."""
        return self._builder.build()

    # -- setters ------------------------------------------------------------

    def comment(self, comment: Comment | dict[str, Any]) -> None:
        self._builder.comment(comment)

    def languages(self, languages: list[str]) -> None:
        self._builder.languages(languages)

    def context(self, context: Context | dict[str, Any]) -> None:
        self._builder.context(context)

    def requested_attributes(
        self, requested_attributes: dict[AttributeName, AttributeRequest | dict[str, Any]]
    ) -> None:
        self._builder.requested_attributes(requested_attributes)

    def span_annotations(self, span_annotations: bool) -> None:
        self._builder.span_annotations(span_annotations)

    def do_not_store(self, do_not_store: bool) -> None:
        self._builder.do_not_store(do_not_store)

    def client_token(self, client_token: str) -> None:
        self._builder.client_token(client_token)

    def session_id(self, session_id: str) -> None:
        self._builder.session_id(session_id)

    def attribute_scores(
        self, attribute_scores: dict[AttributeName, AttributeScore | dict[str, Any]]
    ) -> None:
        self._builder.attribute_scores(attribute_scores)

    def community_id(self, community_id: str) -> None:
        self._builder.community_id(community_id)

    # -- resources ----------------------------------------------------------

    def close(self) -> None:
        self._dispatcher.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
