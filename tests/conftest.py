"""Shared fixtures: isolated environment and scripted prompt sessions."""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator

import pytest
import structlog

from ccr_config.cli.prompts import PromptSession

_ENV_VARS = ("DASHSCOPE_API_KEY", "LANG", "LANGUAGE", "LC_ALL", "CCR_CONFIG_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own locale and API key out of every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Drop logger configuration bound to a previous test's captured stderr."""
    yield
    structlog.reset_defaults()


class ScriptedSession(PromptSession):
    """PromptSession that records reads and releases."""

    def __init__(self, stdin: io.StringIO) -> None:
        self.out = io.StringIO()
        super().__init__(stdin, self.out)
        self.reads = 0
        self.releases = 0

    def ask(self, cue: str, *, secret: bool = False) -> str:
        self.reads += 1
        return super().ask(cue, secret=secret)

    def close(self) -> None:
        self.releases += 1
        super().close()

    @property
    def text(self) -> str:
        return self.out.getvalue()


class ScriptedInput:
    """Session factory that feeds the given lines to every session it opens."""

    def __init__(self, lines: list[str]) -> None:
        self._stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        self.sessions: list[ScriptedSession] = []

    def __call__(self) -> ScriptedSession:
        session = ScriptedSession(self._stdin)
        self.sessions.append(session)
        return session

    @property
    def reads(self) -> int:
        return sum(s.reads for s in self.sessions)


@pytest.fixture
def scripted() -> Callable[..., ScriptedInput]:
    """Build a scripted session factory: ``scripted("1", "sk-key")``."""

    def _make(*lines: str) -> ScriptedInput:
        return ScriptedInput(list(lines))

    return _make
