"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Generator, Iterable, List, Sequence

import pytest
import structlog

# GitPython refuses to import without a git binary unless told to stay quiet;
# the tests that need a real git skip themselves instead.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

from common.git_utils import CommandResult  # noqa: E402


@dataclass
class Invocation:
    command: str
    args: List[str]
    cwd: str


class FakeRunner:
    """Records every command and fails the git subcommands it is told to."""

    def __init__(self, failures: Iterable[str] = ()) -> None:
        self.failures = set(failures)
        self.calls: List[Invocation] = []

    def run(self, command: str, args: Sequence[str]) -> CommandResult:
        args = list(args)
        self.calls.append(Invocation(command, args, os.getcwd()))
        if args and args[0] in self.failures:
            return CommandResult(
                command=command,
                args=args,
                output=f"fatal: {args[0]} failed",
                success=False,
                exit_status=128,
                error="exit status 128",
            )
        return CommandResult(command=command, args=args, output="", success=True)

    @property
    def subcommands(self) -> List[str]:
        return [c.args[0] for c in self.calls]

    def call(self, subcommand: str) -> Invocation:
        return next(c for c in self.calls if c.args[0] == subcommand)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo structlog/stdlib configuration done by the code under test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def make_runner() -> Callable[..., FakeRunner]:
    """Factory for recording fake runners."""
    return FakeRunner


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from a scratch directory; the original cwd comes back afterwards."""
    wd = tmp_path / "work"
    wd.mkdir()
    monkeypatch.chdir(wd)
    return wd


@pytest.fixture
def ssh_paths(tmp_path: Path) -> tuple[str, str]:
    """A credential source directory and a not-yet-existing link target."""
    source = tmp_path / "builder-home-ssh"
    source.mkdir()
    (source / "id_rsa").write_text("not a real key\n")
    return str(source), str(tmp_path / "root-ssh")


@pytest.fixture
def git_available() -> None:
    if shutil.which("git") is None:
        pytest.skip("git binary not installed")
