"""CommandRunner backed by GitPython's process wrapper."""

from typing import Sequence

from git import Git
from git.exc import GitCommandNotFound

from .git_utils import CommandResult, combine_output
from .logging import get_logger

logger = get_logger(__name__)


class GitCommandRunner:
    """Runs commands through ``git.Git.execute``.

    No working directory is pinned, so every call runs in whatever the
    process working directory is at call time.
    """

    def __init__(self) -> None:
        self._git = Git()

    def run(self, command: str, args: Sequence[str]) -> CommandResult:
        argv = [command, *args]
        logger.debug("Running command", command=command, args=list(args))
        try:
            status, stdout, stderr = self._git.execute(
                argv,
                with_extended_output=True,
                with_exceptions=False,
            )
        except (GitCommandNotFound, OSError) as e:
            return CommandResult(
                command=command,
                args=list(args),
                output="",
                success=False,
                exit_status=None,
                error=str(e),
            )

        return CommandResult(
            command=command,
            args=list(args),
            output=combine_output(stdout, stderr),
            success=status == 0,
            exit_status=status,
            error=None if status == 0 else f"exit status {status}",
        )
