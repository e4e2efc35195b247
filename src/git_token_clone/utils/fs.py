"""Filesystem helpers for the destination directory."""

from pathlib import Path

from ..errors import DestinationError
from ..logging import get_logger

logger = get_logger(__name__)

GIT_METADATA_DIR = ".git"


def has_repo_metadata(dest: str) -> bool:
    """Return True when ``dest`` already holds a checked-out repository.

    Only the presence of the ``.git`` directory is considered.
    """
    return (Path(dest) / GIT_METADATA_DIR).is_dir()


def ensure_parent_dir(dest: str) -> Path:
    """Create the parent directory of ``dest`` if it does not exist yet.

    Args:
        dest: Destination path of the clone, already user-expanded

    Returns:
        The parent directory

    Raises:
        DestinationError: If the directory cannot be created
    """
    parent = Path(dest).parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DestinationError(
            f"Cannot create parent directory {parent}: {e.strerror or e.__class__.__name__}",
            data={"path": str(parent)},
        ) from e
    logger.debug("Parent directory ready", path=str(parent))
    return parent
