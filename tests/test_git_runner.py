"""Tests for the GitPython-backed command runner."""

from __future__ import annotations

from pathlib import Path

from common.git_runner import GitCommandRunner
from common.git_utils import CommandRunner


class TestGitCommandRunner:
    """Runs real commands; skipped without a git binary."""

    def test_is_a_command_runner(self) -> None:
        assert isinstance(GitCommandRunner(), CommandRunner)

    def test_success(self, git_available) -> None:
        result = GitCommandRunner().run("git", ["--version"])

        assert result.success
        assert result.exit_status == 0
        assert result.error is None
        assert result.output.startswith("git version")

    def test_failure_captures_output(self, git_available, workdir: Path) -> None:
        result = GitCommandRunner().run("git", ["checkout", "does-not-exist"])

        assert not result.success
        assert result.exit_status != 0
        assert result.error == f"exit status {result.exit_status}"
        assert "fatal" in result.output.lower()
        assert result.args == ["checkout", "does-not-exist"]

    def test_runs_in_current_directory(self, git_available, workdir: Path) -> None:
        result = GitCommandRunner().run("git", ["init"])

        assert result.success
        assert (workdir / ".git").is_dir()

    def test_missing_binary(self, workdir: Path) -> None:
        result = GitCommandRunner().run(str(workdir / "no-such-git"), ["--version"])

        assert not result.success
        assert result.exit_status is None
        assert result.error

    def test_non_executable_binary(self, workdir: Path) -> None:
        """A binary without the exec bit is a failed result, not an exception."""
        binary = workdir / "git"
        binary.write_text("#!/bin/sh\nexit 0\n")
        binary.chmod(0o644)

        result = GitCommandRunner().run(str(binary), ["--version"])

        assert not result.success
        assert result.exit_status is None
        assert "Permission denied" in result.error
        assert result.args == ["--version"]
