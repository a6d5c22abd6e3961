# steps/git-init/src/git_init/models/params.py
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEFAULT_REVISION = "master"


class InitRepoParams(BaseModel):
    """
    Input parameters for the init step:
      - url: Remote Git URL; not checked here, `git remote add` rejects bad ones
      - revision: Branch, tag or commit to make HEAD (empty means "master")
      - path: Directory to initialize; empty means the current directory
    """

    url: str = ""
    revision: str = Field(default="", validate_default=True)
    path: str = ""

    @field_validator("revision")
    @classmethod
    def _default_revision(cls, v: str) -> str:
        return v or DEFAULT_REVISION
