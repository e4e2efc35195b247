# File: src/git_token_clone/models/options.py
from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_USERNAME = "x-access-token"


class InvocationOptions(BaseModel):
    """
    Options for one clone/pull run:
      - repo_url: GitHub HTTPS URL (e.g., https://github.com/org/repo.git)
      - dest: Destination directory
      - token: Explicit token (wins over token_file and the environment)
      - token_file: File holding a raw token or KEY=VALUE assignments
      - username: Username for --basic-url mode only
      - branch: Branch to clone (clone only)
      - shallow: Depth-1 clone (clone only)
      - basic_url: Embed credentials in the URL instead of sending a header
      - quiet: Pass -q to git
    """

    model_config = ConfigDict(frozen=True)

    repo_url: Optional[str] = None
    dest: Optional[str] = None
    token: Optional[str] = Field(default=None, repr=False)
    token_file: Optional[str] = None
    username: str = Field(default=DEFAULT_USERNAME, min_length=1)
    branch: Optional[str] = None
    shallow: bool = False
    basic_url: bool = False
    quiet: bool = False

    @field_validator("dest", mode="before")
    @classmethod
    def _expand_dest(cls, v: Optional[str]) -> Optional[str]:
        # one spelling of dest for the .git probe, mkdir and the git argv
        if not v:
            return v
        return os.path.expanduser(v.strip())

    @property
    def is_complete(self) -> bool:
        return bool(self.repo_url) and bool(self.dest)
