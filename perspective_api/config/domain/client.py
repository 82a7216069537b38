"""Client configuration model."""

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://commentanalyzer.googleapis.com/v1alpha1"
DEFAULT_TIMEOUT_SECONDS = 30.0


class ClientConfig(BaseModel, frozen=True):
    api_key: str = Field(min_length=1, repr=False)
    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)
