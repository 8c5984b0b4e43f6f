"""Top-level marker configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...utils.get_marker_home import get_marker_home
from .HttpConfig import HttpConfig
from .LogConfig import LogConfig


class MarkerConfig(BaseModel):
    """Options for one link-checking run."""

    model_config = ConfigDict(extra="forbid")

    root: Path = Field(Path("."), description="Root of the documentation to be checked")
    skip_http: bool = Field(False, description="Skip validation of HTTP[S] URLs")
    exclude: list[str] = Field(default_factory=list, description="Paths or globs to leave out of the walk")
    allow_absolute_paths: bool = Field(False, description="Resolve absolute link paths against root")
    http: HttpConfig = Field(default_factory=HttpConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("root")
    @classmethod
    def _normalize_root(cls, v: Path) -> Path:
        return Path(v).expanduser()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on MARKER_HOME or default to ~/.marker."""
        return get_marker_home() / "config.json"

    @classmethod
    def load(cls, path: Path | None = None) -> "MarkerConfig":
        """Load and validate config from file.

        A missing file is not an error: every option has a default.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = path or cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        return cls._validate(raw)

    def with_overrides(self, **overrides: Any) -> "MarkerConfig":
        """Return a validated copy with the non-None overrides applied.

        Keys of the form ``http_<name>`` update the ``http`` section.

        Raises:
            ValueError: If an override fails validation
        """
        data = self.model_dump()
        for key, value in overrides.items():
            if value is None:
                continue
            if key.startswith("http_"):
                data["http"][key.removeprefix("http_")] = value
            else:
                data[key] = value
        return self._validate(data)

    @classmethod
    def _validate(cls, raw: Any) -> "MarkerConfig":
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            first = e.errors()[0]
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc)
            error_msg = first.get("msg", str(e))
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert MarkerConfig instance to a dictionary for serialization."""
        return self.model_dump(mode="json")
