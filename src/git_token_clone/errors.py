"""Error definitions for clone/pull runs."""

from typing import Optional, Dict, Any

from .models.invocation import RunResult


class GitTokenCloneError(Exception):
    """Base exception for git-token-clone failures."""

    def __init__(
        self,
        message: str,
        exit_code: int = 1,
        data: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code
        self.data = data or {}

    def to_log_fields(self) -> Dict[str, Any]:
        """Flatten into keyword fields for a log event."""
        fields = {
            "error": type(self).__name__,
            "message": self.message,
            "exit_code": self.exit_code,
        }
        if self.data:
            fields.update(self.data)
        return fields


class MissingDependency(GitTokenCloneError):
    """The git client could not be found."""

    def __init__(self, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message, exit_code=1, data=data)


class InvalidOption(GitTokenCloneError):
    """Error for unknown or malformed command-line options."""

    def __init__(self, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message, exit_code=2, data=data)


class TokenFileError(GitTokenCloneError):
    """The token file could not be read."""

    def __init__(self, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message, exit_code=1, data=data)


class DestinationError(GitTokenCloneError):
    """The destination's parent directory could not be created."""

    def __init__(self, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message, exit_code=1, data=data)


class CredentialUnavailable(GitTokenCloneError):
    """git rejected the request and no token had been resolved."""


class NonFastForward(GitTokenCloneError):
    """Pull refused because local and remote history diverged."""


class NetworkOrAuthFailure(GitTokenCloneError):
    """Any other transport or authentication failure reported by git."""


_AUTH_MARKERS = (
    "authentication failed",
    "could not read username",
    "could not read password",
    "terminal prompts disabled",
    "invalid username or password",
    "returned error: 401",
    "returned error: 403",
)

_NON_FF_MARKERS = (
    "not possible to fast-forward",
    "diverging branches can't be fast-forwarded",
    "diverging branches",
)


def classify_failure(result: RunResult, token_present: bool) -> GitTokenCloneError:
    """Map a failed git run onto the error taxonomy.

    The exit code is always git's own; classification only decides which
    kind is reported in the log line.

    Args:
        result: Outcome of the delegated git call
        token_present: Whether a non-empty token was resolved

    Returns:
        Error instance describing the failure
    """
    diagnostic = (result.stderr or "").lower()
    data = {"status": result.status}

    if any(marker in diagnostic for marker in _NON_FF_MARKERS):
        return NonFastForward("Pull would not fast-forward", exit_code=result.status, data=data)

    if not token_present and any(marker in diagnostic for marker in _AUTH_MARKERS):
        return CredentialUnavailable(
            "No token was resolved and git could not authenticate",
            exit_code=result.status,
            data=data,
        )

    if result.status == 127:
        return MissingDependency("git could not be executed", data=data)

    return NetworkOrAuthFailure(f"git exited with status {result.status}", exit_code=result.status, data=data)
