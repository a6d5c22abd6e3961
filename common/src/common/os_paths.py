"""OS and path utilities for the pipeline steps."""

import os
from pathlib import Path

from .git_utils import CredentialLinkError, GitError
from .logging import get_logger

logger = get_logger(__name__)


class PathError(GitError):
    """Exception for path-related errors."""
    pass


def link_credentials(source: str, target: str) -> None:
    """Symlink ``target`` to ``source`` so ssh finds the mounted keys.

    Git ignores $HOME/.ssh in the build container and reads /root/.ssh,
    so the mounted credential directory is linked there. SSH auth only
    works for the built-in git support, not for custom steps.

    Raises:
        CredentialLinkError: If the link cannot be created, including when
            something already exists at ``target``
    """
    try:
        os.symlink(source, target)
    except OSError as e:
        raise CredentialLinkError(f"Unexpected error creating symlink: {e}") from e
    logger.debug("Linked credentials", source=source, target=target)


def ensure_directory(directory_path: str) -> None:
    """Create ``directory_path`` if it is still missing.

    Best effort: failures are only logged, the following directory change
    reports anything that actually matters.
    """
    path = Path(directory_path)
    if path.exists():
        return
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.debug("Creating directory at path", path=directory_path, error=str(e))


def get_current_working_directory() -> str:
    """Get the current working directory safely.

    Returns:
        Current working directory path
    """
    try:
        return str(Path.cwd().resolve())
    except OSError as e:
        raise PathError(f"Cannot determine current working directory: {e}")


def change_working_directory(directory_path: str) -> str:
    """Change the current working directory.

    Args:
        directory_path: New working directory

    Returns:
        Previous working directory, or "" if it no longer exists

    Raises:
        PathError: If directory change fails
    """
    # only for the log line; the old cwd may already be gone
    try:
        current_dir = get_current_working_directory()
    except PathError:
        current_dir = ""
    try:
        os.chdir(directory_path)
    except OSError as e:
        raise PathError(
            f"Failed to change directory with path {directory_path}; err {e}"
        ) from e
    logger.debug("Changed working directory", from_dir=current_dir, to_dir=directory_path)
    return current_dir


def ensure_directory_writable(directory_path: str) -> None:
    """Raise PathError unless ``directory_path`` is a writable directory."""
    path = Path(directory_path)
    if not path.is_dir():
        raise PathError(f"Not a directory: {directory_path}")
    if not os.access(path, os.W_OK):
        raise PathError(f"Directory is not writable: {directory_path}")
