"""Git command plumbing shared by the pipeline steps."""

import os
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, runtime_checkable
from urllib.parse import urlparse


class GitError(Exception):
    """Base exception for git operations."""
    pass


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command.

    ``output`` is the combined stdout and stderr of the process.
    """

    command: str
    args: List[str] = field(default_factory=list)
    output: str = ""
    success: bool = True
    exit_status: Optional[int] = 0
    error: Optional[str] = None

    def describe(self) -> str:
        return f"{self.command} {' '.join(self.args)}".strip()


class CommandFailedError(GitError):
    """A required external command did not succeed."""

    def __init__(self, result: CommandResult):
        super().__init__(
            f"Unexpected error running {result.describe()}: {result.error}"
        )
        self.result = result


class CredentialLinkError(GitError):
    """The SSH credential directory could not be linked."""
    pass


@runtime_checkable
class CommandRunner(Protocol):
    """Narrow seam around process execution."""

    def run(self, command: str, args: Sequence[str]) -> CommandResult:
        """Run ``command`` with ``args`` in the current working directory."""
        ...


def combine_output(stdout: Optional[str], stderr: Optional[str]) -> str:
    """Join stdout and stderr into a single diagnostic buffer."""
    parts = [p for p in (stdout, stderr) if p]
    return "\n".join(parts)


def is_valid_git_url(url: str) -> bool:
    """Check if a URL looks like something ``git remote add`` will accept.

    Args:
        url: Repository URL to validate

    Returns:
        True if the URL appears to be a valid git repository URL
    """
    if not url:
        return False

    try:
        parsed = urlparse(url)
    except ValueError:
        return False

    if parsed.scheme in ('http', 'https', 'git', 'ssh', 'file'):
        return True

    # scp-like syntax (git@github.com:user/repo.git)
    if '@' in url and ':' in url and not parsed.scheme:
        return True

    if os.path.isdir(url):
        return True

    return False
