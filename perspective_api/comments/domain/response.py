"""CommentsResponse: opaque wrapper around a decoded API response body."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CommentsResponse:
    """Decoded JSON body of a Comment Analyzer response, passed through verbatim.

    The accessors below only read from `data`; they never reshape it.
    """

    data: dict[str, Any]

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    @property
    def attribute_scores(self) -> dict[str, Any] | None:
        return self.data.get("attributeScores")

    @property
    def languages(self) -> list[str] | None:
        return self.data.get("languages")

    @property
    def detected_languages(self) -> list[str] | None:
        return self.data.get("detectedLanguages")

    @property
    def client_token(self) -> str | None:
        return self.data.get("clientToken")

    def summary_score(self, attribute: str) -> float | None:
        """Return the summary score value for *attribute*, or None if not scored.

        Entries of an unexpected shape (null or non-object) count as not scored.
        """
        scores = self.attribute_scores
        entry = scores.get(attribute) if isinstance(scores, dict) else None
        summary = entry.get("summaryScore") if isinstance(entry, dict) else None
        return summary.get("value") if isinstance(summary, dict) else None
