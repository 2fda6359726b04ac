from click.testing import CliRunner
from mocks.model import answer

from finagent import cli as cli_module
from finagent.cli import ask, cli, serve
from finagent.router.params import StreamEvent

NO_CREDENTIALS = {
    "OPENAI_API_KEY": None,
    "FINAGENT_OPENAI_API_KEY": None,
    "ALPHA_VANTAGE_API_KEY": None,
    "FINAGENT_ALPHA_VANTAGE_API_KEY": None,
}


def test_ask_without_credentials():
    runner = CliRunner()
    result = runner.invoke(ask, ["How is NVDA?"], env=NO_CREDENTIALS)

    assert result.exit_code == 1
    assert "OpenAI API key is not configured." in result.output


def test_ask_prints_answer(monkeypatch):
    async def fake_stream_events(message, url):
        assert message == "How is NVDA?"
        assert url == "http://localhost:8000"
        yield StreamEvent.thought("Researching...")
        yield StreamEvent.message("NVDA is up.")

    monkeypatch.setattr(cli_module, "stream_events", fake_stream_events)

    runner = CliRunner()
    result = runner.invoke(cli, ["ask", "How is NVDA?", "--url", "http://localhost:8000"])

    assert result.exit_code == 0
    assert "NVDA is up." in result.output


def test_ask_in_process(monkeypatch, config):
    monkeypatch.setattr(cli_module, "get_config", lambda: config)
    monkeypatch.setattr(cli_module, "get_default_model", lambda config: answer("Answered locally.").model)

    runner = CliRunner()
    result = runner.invoke(cli, ["ask", "hi"])

    assert result.exit_code == 0
    assert "Answered locally." in result.output


def test_serve_runs_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr("uvicorn.run", lambda *args, **kwargs: calls.append((args, kwargs)))

    runner = CliRunner()
    result = runner.invoke(serve, ["--port", "9000"])

    assert result.exit_code == 0
    assert calls == [(("finagent.app:app",), {"host": "127.0.0.1", "port": 9000, "reload": False})]


def test_command_is_required():
    runner = CliRunner()
    result = runner.invoke(cli, ["unknown"])

    assert result.exit_code != 0
