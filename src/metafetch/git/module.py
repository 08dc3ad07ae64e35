"""Module descriptor model."""
from typing import Optional

from pydantic import BaseModel, Field


class ModuleSpec(BaseModel):
    """A dependency as declared by the resolver's caller.

    All fields are optional: modules resolved from a forge rather than a git
    remote simply leave ``remote`` unset.
    """

    name: Optional[str] = Field(default=None, description="Module name")
    remote: Optional[str] = Field(default=None, description="Git repository URL")
    ref: Optional[str] = Field(default=None, description="Explicit git ref")
    tag: Optional[str] = Field(default=None, description="Git tag")
    commit: Optional[str] = Field(default=None, description="Git commit SHA")
    branch: Optional[str] = Field(default=None, description="Git branch")
