# File: src/git_token_clone/tools/sync_repo.py
from __future__ import annotations

from typing import Callable

from ..credentials import resolve_credential
from ..errors import classify_failure
from ..logging import get_logger, register_secret
from ..models.invocation import Operation, RunResult
from ..models.options import InvocationOptions
from ..resolver import build_invocation, determine_operation, select_mode
from ..runner import CommandRunner
from ..settings import Settings
from ..utils.fs import ensure_parent_dir

logger = get_logger(__name__)


def sync_repository(
    options: InvocationOptions,
    settings: Settings,
    runner: CommandRunner,
    echo: Callable[[str], None] = print,
) -> RunResult:
    """
    Clone options.repo_url into options.dest, or fast-forward pull when dest
    already holds a repository. Returns git's result; a non-zero status is
    logged with its classified error kind but not raised.
    The caller checks for the git binary (runner.require_git) beforehand.
    """
    token = resolve_credential(options.token, options.token_file, settings.env_token)
    if token:
        register_secret(token)

    operation = determine_operation(options.dest or "")
    mode = select_mode(options.basic_url)

    if operation is Operation.PULL:
        echo(f"Repo exists at {options.dest}; pulling…")
    else:
        echo(f"Cloning {options.repo_url} -> {options.dest}")
        ensure_parent_dir(options.dest or "")

    invocation = build_invocation(mode, operation, options, token)
    result = runner.run(invocation)

    if not result.ok:
        failure = classify_failure(result, token_present=bool(token))
        logger.error("git failed", **failure.to_log_fields())
    else:
        logger.info("git finished", operation=operation.value, mode=mode.value)
    return result
