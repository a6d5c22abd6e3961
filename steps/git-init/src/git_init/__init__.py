"""git-init - prepares a working copy of a remote repository for a build."""

__version__ = "0.1.0"
