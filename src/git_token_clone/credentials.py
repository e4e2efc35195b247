"""Token resolution: --token, then --token-file, then the environment."""

from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

from .errors import TokenFileError
from .logging import get_logger

logger = get_logger(__name__)

# names looked up, in order, in a KEY=VALUE token file
TOKEN_FILE_KEYS = ("TOKEN", "GITHUB_TOKEN")


def read_token_file(path: str) -> Optional[str]:
    """Extract a token from ``path``.

    A file containing ``=`` is read as dotenv-style assignments and the value
    of ``TOKEN`` (else ``GITHUB_TOKEN``) is returned. Any other file holds a
    raw token on its first line; all whitespace is stripped from it.

    Args:
        path: Token file path

    Returns:
        The token, or None when the file names none

    Raises:
        TokenFileError: If the file cannot be read
    """
    token_path = Path(path).expanduser()
    try:
        content = token_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TokenFileError(f"Cannot read token file {path}: {e.__class__.__name__}", data={"path": path}) from e

    if "=" in content:
        values = dotenv_values(token_path)
        for key in TOKEN_FILE_KEYS:
            value = values.get(key)
            if value:
                logger.debug("Token read from assignment file", path=path, key=key)
                return value
        logger.info("Token file has no TOKEN or GITHUB_TOKEN assignment", path=path)
        return None

    first_line = content.splitlines()[0] if content else ""
    token = "".join(first_line.split())
    return token or None


def resolve_credential(
    flag_token: Optional[str],
    token_file_path: Optional[str],
    env_token: Optional[str],
) -> Optional[str]:
    """Pick the token for this run.

    Precedence is flag > file > environment. An absent token is not an error
    here; git reports the authentication failure itself.
    """
    if flag_token:
        logger.debug("Using token from --token")
        return flag_token

    if token_file_path:
        token = read_token_file(token_file_path)
        if token:
            logger.debug("Using token from --token-file", path=token_file_path)
            return token

    if env_token:
        logger.debug("Using token from GITHUB_TOKEN")
        return env_token

    logger.warning("No token resolved; git will run unauthenticated")
    return None
