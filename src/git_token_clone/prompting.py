# File: src/git_token_clone/prompting.py
from __future__ import annotations

from typing import Callable

from .models.options import InvocationOptions

REPO_PROMPT = "GitHub repo HTTPS URL: "
DEST_PROMPT = "Destination directory: "


def complete_missing_options(
    options: InvocationOptions,
    prompt: Callable[[str], str] = input,
) -> InvocationOptions:
    """
    Ask for --repo and/or --dest when they were not given.
    This is the only interactive step; credentials are never prompted for.
    """
    updates = {}
    if not options.repo_url:
        updates["repo_url"] = prompt(REPO_PROMPT).strip()
    if not options.dest:
        updates["dest"] = prompt(DEST_PROMPT).strip()
    if not updates:
        return options
    # validate again so prompted values get the same normalisation as flags
    return InvocationOptions.model_validate({**options.model_dump(), **updates})
