"""Output schema of the check command."""

from pydantic import BaseModel, ConfigDict, Field


class LinkErrorRecord(BaseModel):
    """One reported link error."""

    model_config = ConfigDict(extra="forbid")

    path: str
    line: int
    kind: str
    title: str
    text: str
    target: str
    detail: str | None = None
    message: str


class CheckOutput(BaseModel):
    """Result of ``marker check``."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Fatal or configuration errors")
    warnings: list[str] = Field(default_factory=list)
    root: str
    files_checked: int = 0
    links_checked: int = 0
    urls_checked: int = 0
    link_errors: list[LinkErrorRecord] = Field(default_factory=list)
