# File: src/git_token_clone/runner.py
from __future__ import annotations

import shutil
import sys
from typing import Optional, Protocol, TextIO

from .errors import MissingDependency
from .logging import get_logger, redact
from .models.invocation import GitInvocation, RunResult

logger = get_logger(__name__)


class CommandRunner(Protocol):
    """Runs one delegated command to completion."""

    def run(self, invocation: GitInvocation) -> RunResult:
        ...


def require_git(program: str = "git") -> str:
    """Return the path of the git executable or raise MissingDependency."""
    path = shutil.which(program)
    if not path:
        raise MissingDependency(f"{program} is required.", data={"program": program})
    return path


class GitRunner:
    """
    CommandRunner backed by GitPython's Git.execute.
    git's own output is forwarded to the given streams once the call returns.
    """

    def __init__(
        self,
        working_dir: Optional[str] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.working_dir = working_dir
        self.stdout = stdout
        self.stderr = stderr

    def run(self, invocation: GitInvocation) -> RunResult:
        # imported late: GitPython refuses to import when no git binary is installed
        from git.cmd import Git
        from git.exc import GitCommandNotFound

        logger.info(
            "Running git",
            operation=invocation.operation.value,
            mode=invocation.mode.value,
            args=invocation.redacted_args(),
        )
        try:
            status, out, err = Git(self.working_dir).execute(
                invocation.argv(),
                with_extended_output=True,
                with_exceptions=False,
                env=dict(invocation.env),
            )
        except GitCommandNotFound as e:
            raise MissingDependency(f"{invocation.program} could not be executed: {e.__class__.__name__}") from e

        result = RunResult(status=status, stdout=out or "", stderr=err or "")
        self._forward(result, invocation.secret)
        return result

    def _forward(self, result: RunResult, secret: str) -> None:
        out_stream = self.stdout or sys.stdout
        err_stream = self.stderr or sys.stderr
        if result.stdout:
            out_stream.write(redact(result.stdout, [secret]) + "\n")
            out_stream.flush()
        if result.stderr:
            err_stream.write(redact(result.stderr, [secret]) + "\n")
            err_stream.flush()
