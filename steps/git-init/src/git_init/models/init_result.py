# steps/git-init/src/git_init/models/init_result.py
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class InitResult(BaseModel):
    """
    What the init step did. `path` is the path as requested ("" for the
    current directory), not the resolved one.
    """
    url: str
    revision: str = Field(min_length=1)
    path: str
    strategy: Literal["shallow-fetch", "pull-checkout"]
    pull_failed: bool = False
