# steps/git-init/src/git_init/tools/__init__.py
from __future__ import annotations

from .init_repo import RepositoryInitializer

__all__ = ["RepositoryInitializer"]
