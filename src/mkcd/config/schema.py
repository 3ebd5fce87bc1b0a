"""Pydantic models for mkcd configuration."""

from pydantic import BaseModel, Field, field_validator


class SettingsConfig(BaseModel):
    """Output settings for mkcd."""

    verbose: bool = Field(
        default=False,
        description="Report on stderr whether the directory was created",
    )
    color: bool = Field(default=True, description="Use colored diagnostics")


class MkcdConfig(BaseModel):
    """Root configuration for mkcd."""

    version: str = Field(description="Config schema version")
    settings: SettingsConfig = Field(default_factory=SettingsConfig)

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate version format."""
        if not v.startswith("1."):
            raise ValueError(
                f"Unsupported config version: {v}. Only version 1.x is supported."
            )
        return v
