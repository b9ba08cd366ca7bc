"""
Summarizer Form Controller Tests

  - Empty input (no network call)
  - Successful submission (summary, elapsed time, notice)
  - Failures (non-OK status, exceptions, malformed body)
  - State transitions and in-flight guard
  - End-to-end against the FastAPI app
  - CLI front end
"""

from unittest.mock import MagicMock, patch

import pytest
import requests
from fastapi.testclient import TestClient

from client import (
    FAILURE_MESSAGE,
    Notice,
    SubmissionState,
    SummarizeRequest,
    SummarizerController,
)
from client.cli import main as cli_main
from prompting import SummaryFormat, SummaryLength, SummaryTone


def _response(status_code=200, body=None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body if body is not None else {}
    return response


def _controller(session, **kwargs) -> SummarizerController:
    ticks = iter([10.0, 11.5])
    return SummarizerController(
        base_url="http://summarizer.test",
        session=session,
        clock=lambda: next(ticks),
        **kwargs,
    )


class TestSummarizeRequest:

    def test_payload(self):
        request = SummarizeRequest(
            text="The quick brown fox...",
            target_length=SummaryLength.BALANCED,
            format=SummaryFormat.BULLETS,
            tone=SummaryTone.CASUAL,
        )
        assert request.to_payload() == {
            "userInput": "Please summarize the following text in approximately 50 words:\n\nThe quick brown fox...",
            "format": "bullets",
            "tone": "casual",
        }

    def test_payload_defaults(self):
        payload = SummarizeRequest(text="Hello").to_payload()
        assert "approximately 25 words" in payload["userInput"]
        assert payload["format"] == "paragraph"
        assert payload["tone"] == "professional"


class TestEmptyInput:

    @pytest.mark.parametrize("text", ["", "   ", "\n\t "])
    def test_no_network_call(self, text):
        session = MagicMock()
        controller = _controller(session, text=text)

        assert controller.submit() is None

        session.post.assert_not_called()
        assert controller.notices == [Notice(
            title="No text provided",
            description="Please enter some text to summarize.",
            variant="destructive",
        )]
        assert controller.state == SubmissionState.IDLE
        assert controller.last_outcome is None


class TestSubmission:

    def test_success(self):
        session = MagicMock()
        session.post.return_value = _response(200, {"aiResponse": "• point one\n• point two"})
        controller = _controller(session, text="The quick brown fox...", format=SummaryFormat.BULLETS)

        result = controller.submit()

        assert result == "• point one\n• point two"
        assert controller.summary == result
        assert controller.elapsed_s == pytest.approx(1.5)
        assert controller.notices[-1] == Notice(
            title="Summary Generated", description="Completed in 1.50 seconds"
        )
        assert controller.state == SubmissionState.IDLE
        assert controller.last_outcome == SubmissionState.SUCCESS

        url = session.post.call_args.args[0]
        payload = session.post.call_args.kwargs["json"]
        assert url == "http://summarizer.test/api/generate-summary"
        assert payload["format"] == "bullets"
        assert "timeout" not in session.post.call_args.kwargs

    def test_timeout_forwarded(self):
        session = MagicMock()
        session.post.return_value = _response(200, {"aiResponse": "ok"})
        controller = _controller(session, text="x", timeout_s=5.0)

        controller.submit()

        assert session.post.call_args.kwargs["timeout"] == 5.0

    def test_previous_summary_cleared_on_failure(self):
        session = MagicMock()
        session.post.return_value = _response(500, {"error": "e", "details": "d"})
        controller = _controller(session, text="Some text", summary="old summary")

        controller.submit()

        assert controller.summary == FAILURE_MESSAGE

    @pytest.mark.parametrize("setup", [
        lambda s: setattr(s.post, "return_value", _response(500, {"error": "x", "details": "y"})),
        lambda s: setattr(s.post, "side_effect", requests.ConnectionError("refused")),
        lambda s: setattr(s.post, "return_value", _response(200, {"unexpected": True})),
    ])
    def test_failure_shows_generic_message(self, setup):
        session = MagicMock()
        setup(session)
        notify = MagicMock()
        controller = _controller(session, text="Some text", notify=notify)

        assert controller.submit() is None

        assert controller.summary == FAILURE_MESSAGE
        assert controller.last_outcome == SubmissionState.FAILURE
        assert controller.state == SubmissionState.IDLE
        assert not controller.is_loading
        notice = notify.call_args.args[0]
        assert notice.title == "Error"
        assert notice.description == FAILURE_MESSAGE
        assert notice.variant == "destructive"
        assert session.post.call_count == 1

    def test_ignored_while_submitting(self):
        session = MagicMock()
        controller = _controller(session, text="Some text")
        controller.state = SubmissionState.SUBMITTING

        assert controller.submit() is None
        session.post.assert_not_called()

    def test_is_loading_during_request(self):
        seen = []
        session = MagicMock()

        def post(url, json):
            seen.append((controller.state, controller.summary))
            return _response(200, {"aiResponse": "done"})

        session.post.side_effect = post
        controller = _controller(session, text="Some text", summary="previous")

        controller.submit()

        assert seen == [(SubmissionState.SUBMITTING, "")]

    def test_word_count(self):
        controller = _controller(MagicMock(), text="  one two\nthree   four ")
        assert controller.word_count == 4

    def test_summary_word_count(self):
        session = MagicMock()
        session.post.return_value = _response(200, {"aiResponse": "• point one\n• point two"})
        controller = _controller(session, text="The quick brown fox...")

        assert controller.summary_word_count == 0
        controller.submit()
        assert controller.summary_word_count == 6


class TestEndToEnd:
    """Controller against the real app with the stub backend."""

    def test_round_trip(self, monkeypatch):
        from main import app

        monkeypatch.setenv("LLM_BACKEND", "stub")
        monkeypatch.setenv("CLOUDFLARE_GATEWAY_ID", "gw")
        controller = SummarizerController(base_url="http://testserver", session=TestClient(app))
        controller.text = "A long article about foxes."

        assert controller.submit() == "This is a stubbed summary."
        assert controller.last_outcome == SubmissionState.SUCCESS

    def test_server_misconfigured(self):
        from main import app

        controller = SummarizerController(base_url="http://testserver", session=TestClient(app))
        controller.text = "A long article about foxes."

        assert controller.submit() is None
        assert controller.summary == FAILURE_MESSAGE


class TestCli:

    def test_success(self, tmp_path, capsys):
        source = tmp_path / "article.txt"
        source.write_text("The quick brown fox jumps.", encoding="utf-8")
        session = MagicMock()
        session.post.return_value = _response(200, {"aiResponse": "A fox jumps."})
        controller = _controller(session)

        code = cli_main([str(source), "--length", "100", "--format", "outline", "--tone", "academic"], controller=controller)

        out = capsys.readouterr()
        assert code == 0
        assert out.out.strip() == "A fox jumps."
        assert "Text length: 5 words" in out.err
        assert "Summary length: 3 words" in out.err
        payload = session.post.call_args.kwargs["json"]
        assert "approximately 100 words" in payload["userInput"]
        assert payload["format"] == "outline"
        assert payload["tone"] == "academic"

    def test_failure_exit_code(self, tmp_path, capsys):
        source = tmp_path / "article.txt"
        source.write_text("Some text.", encoding="utf-8")
        session = MagicMock()
        session.post.return_value = _response(500)

        code = cli_main([str(source)], controller=_controller(session))

        out = capsys.readouterr()
        assert code == 1
        assert FAILURE_MESSAGE in out.out
        assert "Error" in out.err
        assert "Summary length" not in out.err

    def test_empty_stdin(self, capsys):
        session = MagicMock()
        with patch("sys.stdin") as stdin:
            stdin.read.return_value = "   "
            code = cli_main([], controller=_controller(session))

        assert code == 1
        assert "No text provided" in capsys.readouterr().err
        session.post.assert_not_called()
