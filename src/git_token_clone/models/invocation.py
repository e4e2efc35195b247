# File: src/git_token_clone/models/invocation.py
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

REDACTED = "***"


class AuthMode(str, Enum):
    """How the token travels to git. Exactly one applies per run."""

    HEADER = "header"
    EMBEDDED_URL = "embedded-url"


class Operation(str, Enum):
    CLONE = "clone"
    PULL = "pull"


class GitInvocation(BaseModel):
    """
    A fully-formed call of the git client:
      - program: executable name, always "git"
      - args: argument vector, credential included
      - env: extra environment for this call only
    """

    model_config = ConfigDict(frozen=True)

    program: str = Field(default="git", min_length=1)
    args: Tuple[str, ...]
    env: Dict[str, str] = Field(default_factory=dict)
    operation: Operation
    mode: AuthMode
    secret: str = Field(default="", repr=False, exclude=True)

    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def redacted_args(self) -> list[str]:
        """Argument vector safe to log: the token is replaced wherever it occurs."""
        if not self.secret:
            return list(self.args)
        return [a.replace(self.secret, REDACTED) for a in self.args]


class RunResult(BaseModel):
    status: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.status == 0
