"""Tests for the perspective CLI."""

from pathlib import Path

import pytest
import requests
from typer.testing import CliRunner

from perspective_api.cli.main import app
from tests.comments.fake_session import FakeSession, make_response

runner = CliRunner()

FIXTURES = Path(__file__).parent.parent / "fixtures"

_TOXICITY_BODY = {
    "attributeScores": {
        "TOXICITY": {"summaryScore": {"value": 0.8, "type": "PROBABILITY"}}
    },
    "languages": ["en"],
}


@pytest.fixture
def session(monkeypatch: pytest.MonkeyPatch) -> FakeSession:
    """Route every requests.Session the CLI creates to one FakeSession."""
    fake = FakeSession(response=make_response(200, _TOXICITY_BODY))
    monkeypatch.setattr(
        "perspective_api.comments.infrastructure.dispatcher.requests.Session",
        lambda: fake,
    )
    for var in (
        "PERSPECTIVE_API_KEY",
        "PERSPECTIVE_BASE_URL",
        "PERSPECTIVE_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(var, raising=False)
    return fake


class TestAnalyzeCommand:
    def test_prints_response_json(self, session: FakeSession) -> None:
        result = runner.invoke(app, ["analyze", "hello", "--api-key", "ABC123"])

        assert result.exit_code == 0, result.output
        assert '"value": 0.8' in result.stdout

    def test_sends_default_toxicity_request(self, session: FakeSession) -> None:
        runner.invoke(app, ["analyze", "hello", "--api-key", "ABC123"])

        call = session.calls[0]
        assert call.full_url.endswith("/comments:analyze?key=ABC123")
        assert call.json == {
            "comment": {"text": "hello", "type": "PLAIN_TEXT"},
            "requestedAttributes": {"TOXICITY": {}},
        }

    def test_options_map_to_fields(self, session: FakeSession) -> None:
        runner.invoke(
            app,
            [
                "analyze",
                "hello",
                "--api-key",
                "ABC123",
                "-a",
                "INSULT",
                "-a",
                "THREAT",
                "-l",
                "en",
                "--span-annotations",
                "--do-not-store",
                "--client-token",
                "tok",
                "--session-id",
                "sess",
            ],
        )

        assert session.calls[0].json == {
            "comment": {"text": "hello", "type": "PLAIN_TEXT"},
            "languages": ["en"],
            "requestedAttributes": {"INSULT": {}, "THREAT": {}},
            "spanAnnotations": True,
            "doNotStore": True,
            "clientToken": "tok",
            "sessionId": "sess",
        }

    def test_api_key_from_environment(
        self, session: FakeSession, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PERSPECTIVE_API_KEY", "ENVKEY")

        result = runner.invoke(app, ["analyze", "hello"])

        assert result.exit_code == 0, result.output
        assert session.calls[0].full_url.endswith("?key=ENVKEY")

    def test_api_key_from_config_file(
        self, session: FakeSession, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PERSPECTIVE_TEST_KEY", "FILEKEY")

        result = runner.invoke(
            app,
            ["analyze", "hello", "--config", str(FIXTURES / "valid_config.yaml")],
        )

        assert result.exit_code == 0, result.output
        assert session.calls[0].full_url == (
            "https://perspective.example.test/v1alpha1/comments:analyze?key=FILEKEY"
        )
        assert session.calls[0].timeout == pytest.approx(12.5)

    def test_missing_api_key_exits_1(self, session: FakeSession) -> None:
        result = runner.invoke(app, ["analyze", "hello"])

        assert result.exit_code == 1
        assert "no API key" in result.output
        assert session.calls == []

    def test_api_error_exits_1_with_message(self, session: FakeSession) -> None:
        session.response = make_response(
            400, {"error": {"message": "Comment too long", "code": 400}}
        )

        result = runner.invoke(app, ["analyze", "hello", "--api-key", "ABC123"])

        assert result.exit_code == 1
        assert "Comment too long" in result.output

    def test_transport_error_exits_1(self, session: FakeSession) -> None:
        session.error = requests.ConnectionError("connection refused")

        result = runner.invoke(app, ["analyze", "hello", "--api-key", "ABC123"])

        assert result.exit_code == 1
        assert "Request failed" in result.output

    def test_malformed_config_file_exits_1(self, session: FakeSession) -> None:
        result = runner.invoke(
            app,
            ["analyze", "hello", "--config", str(FIXTURES / "malformed_config.yaml")],
        )

        assert result.exit_code == 1
        assert "Failed to parse config file" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert session.calls == []

    def test_missing_config_file_names_path(self, session: FakeSession) -> None:
        result = runner.invoke(
            app,
            ["analyze", "hello", "--config", str(FIXTURES / "nowhere.yaml")],
        )

        assert result.exit_code == 1
        assert "Failed to read config file" in result.output
        assert "nowhere.yaml" in result.output

    def test_invalid_log_format_exits_1(self, session: FakeSession) -> None:
        result = runner.invoke(
            app, ["analyze", "hello", "--api-key", "ABC123", "--log-format", "xml"]
        )

        assert result.exit_code == 1
        assert session.calls == []


class TestSuggestScoreCommand:
    def test_sends_suggest_score_request(self, session: FakeSession) -> None:
        result = runner.invoke(
            app,
            [
                "suggest-score",
                "hello",
                "--api-key",
                "ABC123",
                "--attribute",
                "TOXICITY",
                "--score",
                "0.2",
                "--community-id",
                "forum-1",
            ],
        )

        assert result.exit_code == 0, result.output
        call = session.calls[0]
        assert call.full_url.endswith("/comments:suggestscore?key=ABC123")
        assert call.json == {
            "comment": {"text": "hello", "type": "PLAIN_TEXT"},
            "attributeScores": {
                "TOXICITY": {"summaryScore": {"value": 0.2, "type": "PROBABILITY"}}
            },
            "communityId": "forum-1",
        }

    def test_score_is_required(self, session: FakeSession) -> None:
        result = runner.invoke(
            app,
            ["suggest-score", "hello", "--api-key", "ABC123", "--attribute", "TOXICITY"],
        )

        assert result.exit_code != 0
        assert session.calls == []
