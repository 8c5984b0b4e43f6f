"""HTTP checker configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ...utils.get_package_version import get_package_version


class HttpConfig(BaseModel):
    """Settings for the URL checker."""

    model_config = ConfigDict(extra="forbid")

    timeout: float = Field(10.0, gt=0, description="Seconds before a request is reported as failed")
    max_workers: int = Field(8, ge=1, description="Distinct URLs checked concurrently")
    user_agent: str | None = Field(None, description="User-Agent header (default marker/<version>)")

    def get_user_agent(self) -> str:
        return self.user_agent or f"marker/{get_package_version()}"
