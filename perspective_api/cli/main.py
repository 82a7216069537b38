"""CLI entrypoint for perspective-client: typer app with `analyze` and `suggest-score`."""

import json
import sys
from collections.abc import Callable
from pathlib import Path

import requests
import structlog
import typer
import yaml

from perspective_api.comments.application.client import CommentsClient
from perspective_api.comments.domain.response import CommentsResponse
from perspective_api.comments.infrastructure.observer import StructlogCommentsObserver
from perspective_api.config.domain.client import ClientConfig
from perspective_api.config.infrastructure.observer import StructlogConfigObserver
from perspective_api.config.infrastructure.yaml_loader import (
    YamlConfigLoader,
    config_from_env,
)
from perspective_api.core.errors import PerspectiveError

app = typer.Typer(add_completion=False)

_API_KEY_HELP = "API key; falls back to the config file, then PERSPECTIVE_API_KEY"


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(
    config_path: Path | None, api_key: str | None, timeout: float | None
) -> ClientConfig:
    """Resolve the client config: explicit flags win over the file or environment."""
    overrides = {"api_key": api_key, "timeout_seconds": timeout}
    observer = StructlogConfigObserver()
    if config_path is not None:
        return YamlConfigLoader(observer=observer).load(
            path=config_path, overrides=overrides
        )
    return config_from_env(observer=observer, overrides=overrides)


def _run(client_call: Callable[[], CommentsResponse]) -> None:
    """Invoke *client_call*, print the response JSON, and map errors to exit code 1."""
    try:
        response: CommentsResponse = client_call()
    except PerspectiveError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    except yaml.YAMLError as exc:
        typer.echo(f"Failed to parse config file: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except requests.RequestException as exc:
        typer.echo(f"Request failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(json.dumps(response.data, indent=2))


@app.command()
def analyze(
    text: str = typer.Argument(..., help="Comment text to score"),
    attribute: list[str] = typer.Option(
        ["TOXICITY"], "--attribute", "-a", help="Attribute to request; repeatable"
    ),
    language: list[str] = typer.Option(
        [], "--language", "-l", help="ISO 639-1 language code; repeatable"
    ),
    comment_type: str = typer.Option(
        "PLAIN_TEXT", "--comment-type", help="PLAIN_TEXT or HTML"
    ),
    span_annotations: bool = typer.Option(
        False, "--span-annotations", help="Request per-span scores"
    ),
    do_not_store: bool = typer.Option(
        False, "--do-not-store", help="Ask the API not to store the comment"
    ),
    client_token: str | None = typer.Option(None, "--client-token"),
    session_id: str | None = typer.Option(None, "--session-id"),
    api_key: str | None = typer.Option(None, "--api-key", help=_API_KEY_HELP),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to client config YAML"
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="Request timeout in seconds"
    ),
    log_format: str = typer.Option(
        "console", "--log-format", help="Log format: 'console' or 'json'"
    ),
) -> None:
    """Score a comment with an AnalyzeComment request."""
    _configure_structlog(log_format=log_format)

    def call() -> CommentsResponse:
        config = _load_config(config_path=config_path, api_key=api_key, timeout=timeout)
        with CommentsClient.from_config(
            config=config, observer=StructlogCommentsObserver()
        ) as client:
            client.comment({"text": text, "type": comment_type})
            client.requested_attributes({name: {} for name in attribute})
            if language:
                client.languages(language)
            if span_annotations:
                client.span_annotations(True)
            if do_not_store:
                client.do_not_store(True)
            if client_token is not None:
                client.client_token(client_token)
            if session_id is not None:
                client.session_id(session_id)
            return client.analyze()

    _run(call)


@app.command("suggest-score")
def suggest_score(
    text: str = typer.Argument(..., help="Comment text the score applies to"),
    attribute: str = typer.Option(..., "--attribute", "-a", help="Attribute name"),
    score: float = typer.Option(..., "--score", help="Suggested summary score"),
    language: list[str] = typer.Option(
        [], "--language", "-l", help="ISO 639-1 language code; repeatable"
    ),
    comment_type: str = typer.Option(
        "PLAIN_TEXT", "--comment-type", help="PLAIN_TEXT or HTML"
    ),
    community_id: str | None = typer.Option(None, "--community-id"),
    client_token: str | None = typer.Option(None, "--client-token"),
    api_key: str | None = typer.Option(None, "--api-key", help=_API_KEY_HELP),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to client config YAML"
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="Request timeout in seconds"
    ),
    log_format: str = typer.Option(
        "console", "--log-format", help="Log format: 'console' or 'json'"
    ),
) -> None:
    """Send score feedback with a SuggestCommentScore request."""
    _configure_structlog(log_format=log_format)

    def call() -> CommentsResponse:
        config = _load_config(config_path=config_path, api_key=api_key, timeout=timeout)
        with CommentsClient.from_config(
            config=config, observer=StructlogCommentsObserver()
        ) as client:
            client.comment({"text": text, "type": comment_type})
            client.attribute_scores(
                {attribute: {"summaryScore": {"value": score, "type": "PROBABILITY"}}}
            )
            if language:
                client.languages(language)
            if community_id is not None:
                client.community_id(community_id)
            if client_token is not None:
                client.client_token(client_token)
            return client.suggest_score()

    _run(call)


if __name__ == "__main__":
    app()
