from __future__ import annotations

from typer.testing import CliRunner

from preflop_advisor import cli
from preflop_advisor.config import AppSettings
from preflop_advisor.strategy.engine import DecisionEngine

from .fakes import FakeProvider


runner = CliRunner()

ARGS = ["--players", "6", "--position", "BTN", "--hand", "AKo", "--situation", "facing open"]


def test_prompt_prints_messages() -> None:
    result = runner.invoke(cli.app, ["prompt", *ARGS, "--open-size", "3"])
    assert result.exit_code == 0
    assert "Hand: AKo" in result.output
    assert "openSize=3xBB" in result.output


def test_prompt_missing_field() -> None:
    result = runner.invoke(cli.app, ["prompt", "--players", "6"])
    assert result.exit_code == 1
    assert "Missing required fields" in result.output


def test_decide_json(monkeypatch, settings: AppSettings) -> None:
    provider = FakeProvider()
    monkeypatch.setattr(
        DecisionEngine, "from_config", classmethod(lambda cls, _: cls(settings, provider=provider))
    )
    result = runner.invoke(cli.app, ["decide", *ARGS, "--json"])
    assert result.exit_code == 0
    assert '"decision": "3-bet"' in result.output
    assert len(provider.calls) == 1


def test_decide_without_key(monkeypatch) -> None:
    monkeypatch.delenv("ADVISOR_OPENAI_API_KEY", raising=False)
    monkeypatch.setenv("OPENAI_API_KEY", "")
    result = runner.invoke(cli.app, ["decide", *ARGS])
    assert result.exit_code == 1
    assert "OPENAI_API_KEY not set on server" in result.output


def test_version() -> None:
    result = runner.invoke(cli.app, ["version"])
    assert result.exit_code == 0
    assert "Preflop Advisor" in result.output
