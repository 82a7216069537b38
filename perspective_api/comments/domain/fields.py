"""Structurally typed values carried by Comment Analyzer request fields.

Every model accepts plain mappings, keeps unknown keys, and serializes only
the keys it was given, so the API stays the judge of semantic validity.
"""

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

type AttributeName = str


class WireModel(BaseModel):
    """Base for camelCase wire values; snake_case names are accepted too."""

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TextEntry(WireModel):
    """A piece of text with its format, e.g. PLAIN_TEXT or HTML."""

    text: StrictStr | None = None
    type: StrictStr | None = None


class Comment(TextEntry):
    """The text to score, assumed to be UTF-8 raw text."""


class Context(WireModel):
    """Entries that provide the surrounding context of the comment."""

    entries: list[TextEntry] | None = None


class AttributeRequest(WireModel):
    """Per-attribute scoring configuration for an analyze request."""

    score_type: StrictStr | None = None
    score_threshold: StrictFloat | None = None


class Score(WireModel):
    value: StrictFloat | None = None
    type: StrictStr | None = None


class SpanScore(WireModel):
    begin: StrictInt | None = None
    end: StrictInt | None = None
    score: Score | None = None


class AttributeScore(WireModel):
    """A suggested score for one attribute, sent back as feedback."""

    summary_score: Score | None = None
    span_scores: list[SpanScore] | None = None
