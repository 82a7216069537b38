"""Operation descriptors: which request fields each remote call sends."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Operation:
    """A remote Comment Analyzer call.

    `fields` lists request field names in the order they are serialized.
    `method` is the path suffix after ``comments:``.
    """

    name: str
    method: str
    fields: tuple[str, ...]


ANALYZE = Operation(
    name="analyze",
    method="analyze",
    fields=(
        "comment",
        "languages",
        "requested_attributes",
        "context",
        "span_annotations",
        "do_not_store",
        "client_token",
        "session_id",
    ),
)

SUGGEST_SCORE = Operation(
    name="suggestScore",
    method="suggestscore",
    fields=(
        "comment",
        "context",
        "attribute_scores",
        "languages",
        "community_id",
        "client_token",
    ),
)
