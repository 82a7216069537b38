"""CommentsRequest value object and the builder that accumulates it."""

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, ValidationError
from pydantic.alias_generators import to_camel

from perspective_api.comments.domain.errors import RequestFieldError
from perspective_api.comments.domain.fields import (
    AttributeName,
    AttributeRequest,
    AttributeScore,
    Comment,
    Context,
)
from perspective_api.comments.domain.operation import Operation

type JsonBody = dict[str, Any]


class CommentsRequest(BaseModel):
    """Immutable snapshot of the optional request fields.

    A field counts as present only when it was explicitly given, which is
    tracked by pydantic in ``model_fields_set``.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    comment: Comment | None = None
    languages: list[StrictStr] | None = None
    context: Context | None = None
    requested_attributes: dict[AttributeName, AttributeRequest] | None = None
    span_annotations: StrictBool | None = None
    do_not_store: StrictBool | None = None
    client_token: StrictStr | None = None
    session_id: StrictStr | None = None
    attribute_scores: dict[AttributeName, AttributeScore] | None = None
    community_id: StrictStr | None = None

    def present_fields(self, operation: Operation) -> list[str]:
        """Return the operation's field names that are set, in operation order."""
        return [name for name in operation.fields if name in self.model_fields_set]

    def body_for(self, operation: Operation) -> JsonBody:
        """Build the JSON body for *operation* from the present fields only."""
        present = self.present_fields(operation=operation)
        dumped = self.model_dump(
            mode="json",
            by_alias=True,
            exclude_unset=True,
            include=set(present),
        )
        body: JsonBody = {}
        for name in present:
            key = to_camel(name)
            if key in dumped:
                body[key] = dumped[key]
        return body


class CommentsRequestBuilder:
    """Accumulates request fields through setters.

    Calling a setter again overwrites the previous value. There is no unset;
    ``build()`` returns an immutable snapshot that later setter calls do not
    affect.
    """

    def __init__(self) -> None:
        self._request = CommentsRequest()

    def comment(self, comment: Comment | dict[str, Any]) -> None:
        """The text to score, e.g. ``{"text": "...", "type": "PLAIN_TEXT"}``."""
        self._set("comment", comment)

    def languages(self, languages: list[str]) -> None:
        """ISO 639-1 language codes the comment is written in."""
        self._set("languages", languages)

    def context(self, context: Context | dict[str, Any]) -> None:
        """Context for the comment, e.g. ``{"entries": [{"text": ..., "type": ...}]}``."""
        self._set("context", context)

    def requested_attributes(
        self, requested_attributes: dict[AttributeName, AttributeRequest | dict[str, Any]]
    ) -> None:
        """Attribute name to ``{"scoreType": ..., "scoreThreshold": ...}``."""
        self._set("requested_attributes", requested_attributes)

    def span_annotations(self, span_annotations: bool) -> None:
        """Whether to return per-span scores for parts of the text."""
        self._set("span_annotations", span_annotations)

    def do_not_store(self, do_not_store: bool) -> None:
        """Whether the API must not store the comment and context."""
        self._set("do_not_store", do_not_store)

    def client_token(self, client_token: str) -> None:
        """Opaque token echoed back in the response."""
        self._set("client_token", client_token)

    def session_id(self, session_id: str) -> None:
        self._set("session_id", session_id)

    def attribute_scores(
        self, attribute_scores: dict[AttributeName, AttributeScore | dict[str, Any]]
    ) -> None:
        """Attribute name to ``{"summaryScore": ..., "spanScores": [...]}``."""
        self._set("attribute_scores", attribute_scores)

    def community_id(self, community_id: str) -> None:
        """Opaque id associating a score suggestion with a community."""
        self._set("community_id", community_id)

    def build(self) -> CommentsRequest:
        return self._request

    def _set(self, name: str, value: Any) -> None:
        values = {
            field: getattr(self._request, field)
            for field in self._request.model_fields_set
        }
        values[name] = value
        try:
            self._request = CommentsRequest.model_validate(values)
        except ValidationError as exc:
            raise RequestFieldError(field=name, reason=str(exc)) from exc
