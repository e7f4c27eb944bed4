from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

LATEST = "latest"


class ReleaseRequest(BaseModel):
    """
    What the user typed into the install prompt:
      - repository_url: e.g. https://github.com/owner/repo
      - version_label: "latest" or an explicit tag such as "v1.2.0"
    """

    model_config = ConfigDict(frozen=True)

    repository_url: str = Field(min_length=1, description="Repository page on the hosting service.")
    version_label: str = Field(default=LATEST, description='"latest" or a release tag.')

    @field_validator("repository_url", mode="before")
    @classmethod
    def _trim_url(cls, v: str | None) -> str:
        return str(v or "").strip().rstrip("/")

    @field_validator("version_label", mode="before")
    @classmethod
    def _default_version(cls, v: str | None) -> str:
        return str(v or "").strip() or LATEST

    @property
    def is_latest(self) -> bool:
        return self.version_label == LATEST
