# steps/git-init/src/git_init/tools/init_repo.py
from __future__ import annotations

from typing import Any, Optional, Tuple

from common.git_utils import (
    CommandFailedError,
    CommandResult,
    CommandRunner,
    is_valid_git_url,
)
from common.logging import get_logger
from common.os_paths import (
    change_working_directory,
    ensure_directory,
    ensure_directory_writable,
    link_credentials,
)

from ..models.init_result import InitResult
from ..models.params import InitRepoParams
from ..settings import DEFAULT_SSH_SOURCE, DEFAULT_SSH_TARGET, Settings


class RepositoryInitializer:
    """
    Brings a directory to a single revision of a remote repository.

    Steps: link ssh credentials, `git init`, add `origin`, then either a
    shallow fetch + `reset --hard FETCH_HEAD` or, when the fetch fails,
    `pull` + `checkout <revision>`. Fatal failures raise a GitError
    subclass; deciding to exit is left to the caller.

    Changes the process working directory when a path is given.
    """

    def __init__(
        self,
        runner: CommandRunner,
        *,
        git_binary: str = "git",
        ssh_source: str = DEFAULT_SSH_SOURCE,
        ssh_target: str = DEFAULT_SSH_TARGET,
        logger: Optional[Any] = None,
    ) -> None:
        self.runner = runner
        self.git_binary = git_binary
        self.ssh_source = ssh_source
        self.ssh_target = ssh_target
        self.logger = logger or get_logger("git-init")

    @classmethod
    def from_settings(cls, settings: Settings, runner: CommandRunner) -> "RepositoryInitializer":
        return cls(
            runner,
            git_binary=settings.git_binary,
            ssh_source=settings.ssh_source,
            ssh_target=settings.ssh_target,
            logger=get_logger(settings.logger_name, component=settings.logger_name),
        )

    def run(self, params: InitRepoParams) -> InitResult:
        link_credentials(self.ssh_source, self.ssh_target)

        if not is_valid_git_url(params.url):
            self.logger.warning("Repository url does not look like a git remote", url=params.url)

        self._prepare_working_directory(params.path)
        self._git_or_fail("remote", "add", "origin", params.url)
        strategy, pull_failed = self._acquire_revision(params.revision)

        self.logger.info(
            "Successfully cloned",
            url=params.url,
            revision=params.revision,
            path=params.path,
            strategy=strategy,
            pull_failed=pull_failed,
        )
        return InitResult(
            url=params.url,
            revision=params.revision,
            path=params.path,
            strategy=strategy,
            pull_failed=pull_failed,
        )

    def _prepare_working_directory(self, path: str) -> None:
        if not path:
            self._git_or_fail("init")
            return

        self._git_or_fail("init", path)
        ensure_directory(path)
        change_working_directory(path)
        ensure_directory_writable(".")

    def _acquire_revision(self, revision: str) -> Tuple[str, bool]:
        fetched = self._git("fetch", "--depth=1", "--recurse-submodules=yes", "origin", revision)
        if fetched.success:
            self._git_or_fail("reset", "--hard", "FETCH_HEAD")
            return "shallow-fetch", False

        # Shallow fetch fails for old commit ids and hosts report it differently;
        # pull regardless, checkout is the real check.
        pulled = self._git("pull", "--recurse-submodules=yes", "origin")
        if not pulled.success:
            self.logger.warning("Failed to pull origin", error=pulled.error)
        self._git_or_fail("checkout", revision)
        return "pull-checkout", not pulled.success

    def _git(self, *args: str) -> CommandResult:
        result = self.runner.run(self.git_binary, list(args))
        if not result.success:
            self.logger.error(
                "Error running command",
                command=result.command,
                args=result.args,
                error=result.error,
                output=result.output,
            )
        return result

    def _git_or_fail(self, *args: str) -> CommandResult:
        result = self.runner.run(self.git_binary, list(args))
        if not result.success:
            raise CommandFailedError(result)
        return result
