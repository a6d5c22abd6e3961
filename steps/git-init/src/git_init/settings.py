# steps/git-init/src/git_init/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_SSH_SOURCE = "/builder/home/.ssh"
DEFAULT_SSH_TARGET = "/root/.ssh"


def _truthy(v: str | None) -> bool:
    return str(v or "").strip().lower() in {"1", "true", "yes", "y", "on"}


def _str_env(name: str, default: str) -> str:
    return (os.getenv(name) or "").strip() or default


@dataclass
class Settings:
    git_binary: str = "git"

    # where the pipeline mounts the ssh keys, and where git actually looks
    ssh_source: str = DEFAULT_SSH_SOURCE
    ssh_target: str = DEFAULT_SSH_TARGET

    # logging
    log_level: str = "INFO"
    log_structured: bool = True
    logger_name: str = "git-init"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            git_binary=_str_env("GIT_INIT_GIT_BINARY", "git"),
            ssh_source=_str_env("GIT_INIT_SSH_SOURCE", DEFAULT_SSH_SOURCE),
            ssh_target=_str_env("GIT_INIT_SSH_TARGET", DEFAULT_SSH_TARGET),
            log_level=_str_env("LOG_LEVEL", "INFO").upper(),
            log_structured=_truthy(os.getenv("LOG_STRUCTURED", "true")),
            logger_name=_str_env("GIT_INIT_LOGGER_NAME", "git-init"),
        )
