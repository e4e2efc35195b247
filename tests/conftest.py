from __future__ import annotations

from typing import List

import pytest

from git_token_clone.logging import clear_secrets
from git_token_clone.models.invocation import GitInvocation, RunResult
from git_token_clone.settings import Settings


class RecordingRunner:
    """CommandRunner double: records invocations and returns a canned result."""

    def __init__(self, status: int = 0, stderr: str = "") -> None:
        self.status = status
        self.stderr = stderr
        self.calls: List[GitInvocation] = []

    def run(self, invocation: GitInvocation) -> RunResult:
        self.calls.append(invocation)
        return RunResult(status=self.status, stderr=self.stderr)

    @property
    def last(self) -> GitInvocation:
        assert self.calls, "runner was never called"
        return self.calls[-1]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch):
    for name in ("GITHUB_TOKEN", "GIT_TOKEN_CLONE_USERNAME", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    yield
    clear_secrets()


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def git_on_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("git_token_clone.runner.shutil.which", lambda program: f"/usr/bin/{program}")


@pytest.fixture
def make_runner():
    return RecordingRunner
