from __future__ import annotations

import pytest

from preflop_advisor.config import AppSettings


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, OPENAI_API_KEY="sk-test")


@pytest.fixture
def settings_without_key() -> AppSettings:
    return AppSettings(_env_file=None, OPENAI_API_KEY=None)
