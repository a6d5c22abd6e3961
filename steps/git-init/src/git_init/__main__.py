# steps/git-init/src/git_init/__main__.py
from __future__ import annotations

import sys

import click

from common.git_runner import GitCommandRunner
from common.git_utils import CommandFailedError, GitError
from common.logging import configure_logging, get_logger

from . import __version__
from .models.params import InitRepoParams
from .settings import Settings
from .tools.init_repo import RepositoryInitializer


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-url", "--url", "url", default="", help="The url of the Git repository to initialize.")
@click.option("-revision", "--revision", "revision", default="", help="The Git revision to make the repository HEAD.")
@click.option("-path", "--path", "path", default="", help="Path of directory under which git repository will be copied.")
@click.option("--log-level", default=None, help="Overrides LOG_LEVEL.")
@click.version_option(__version__, prog_name="git-init")
def main(url: str, revision: str, path: str, log_level: str | None) -> None:
    """
    Initialize a git working copy at a single revision of a remote.

    Examples:
      git-init -url https://github.com/org/repo.git -revision v1.2.0 -path /workspace/src

      # ssh remotes use the keys mounted at GIT_INIT_SSH_SOURCE
      GIT_INIT_SSH_SOURCE=/builder/home/.ssh python -m git_init -url git@github.com:org/repo.git
    """
    settings = Settings.from_env()
    if log_level:
        settings.log_level = log_level.upper()

    configure_logging(
        settings.log_level,
        service_name=settings.logger_name,
        structured=settings.log_structured,
    )
    logger = get_logger(settings.logger_name)

    params = InitRepoParams(url=url, revision=revision, path=path)
    initializer = RepositoryInitializer.from_settings(settings, GitCommandRunner())

    try:
        initializer.run(params)
    except CommandFailedError as e:
        logger.critical(
            "Unexpected error running command",
            command=e.result.command,
            args=e.result.args,
            error=e.result.error,
            output=e.result.output,
        )
        sys.exit(1)
    except GitError as e:
        logger.critical(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
