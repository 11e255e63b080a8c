"""Pydantic models for chart descriptors and index entries.

Field aliases follow the index.yaml wire names: `apiVersion` and `appVersion`
are camelCase, everything else is lowercase.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Maintainer(BaseModel):
    """A chart maintainer. No validation is applied to any field."""

    email: str
    name: str
    url: str


class Constants(BaseModel):
    """Static identity of a chart, shared by every release of it."""

    model_config = ConfigDict(populate_by_name=True)

    api_version: str = Field(alias="apiVersion")
    app_version: str = Field(alias="appVersion")
    description: str
    home: str
    icon: str
    keywords: list[str]
    maintainers: list[Maintainer]
    name: str
    sources: list[str]
    type: str


class Parameters(BaseModel):
    """Per-release values: what changes every time a chart is published."""

    model_config = ConfigDict(populate_by_name=True)

    app_version: str | None = Field(default=None, alias="appVersion")
    """Overrides Constants.app_version when set."""
    digest: str
    version: str
    urls: list[str]
    """Download locations. A single string is accepted and promoted to a list."""

    @field_validator("urls", mode="before")
    @classmethod
    def _promote_single_url(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value


class ChartEntry(BaseModel):
    """One published release, as stored in index.yaml.

    Fields are declared in the order they are written out.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    api_version: str = Field(alias="apiVersion")
    app_version: str = Field(alias="appVersion")
    created: str
    description: str
    digest: str
    home: str
    icon: str
    keywords: list[str]
    maintainers: list[Maintainer]
    name: str
    sources: list[str]
    type: str
    urls: list[str]
    version: str

    @classmethod
    def from_descriptors(
        cls, constants: Constants, parameters: Parameters, created: str
    ) -> ChartEntry:
        """Merge constants and parameters into a new entry."""
        return cls(
            api_version=constants.api_version,
            app_version=(
                parameters.app_version
                if parameters.app_version is not None
                else constants.app_version
            ),
            created=created,
            description=constants.description,
            digest=parameters.digest,
            home=constants.home,
            icon=constants.icon,
            keywords=list(constants.keywords),
            maintainers=[m.model_copy() for m in constants.maintainers],
            name=constants.name,
            sources=list(constants.sources),
            type=constants.type,
            urls=list(parameters.urls),
            version=parameters.version,
        )

    def to_document(self) -> dict[str, Any]:
        """Return the entry as a plain mapping keyed by wire names."""
        return self.model_dump(by_alias=True, mode="json")
