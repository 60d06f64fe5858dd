"""Run configuration model."""

from pydantic import BaseModel, ConfigDict, field_validator

from kubecronlogs.constants.values import DEFAULT_NAMESPACE


class RunConfig(BaseModel):
    """Immutable settings for one run, built from the command line."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str = DEFAULT_NAMESPACE
    container: str | None = None
    follow: bool = False
    timestamps: bool = False
    context: str | None = None

    # None keeps the fan-out unbounded.
    max_concurrent_streams: int | None = None
    verbose: bool = False

    @field_validator("name", "namespace")
    @classmethod
    def _require_non_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("container", "context")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("max_concurrent_streams")
    @classmethod
    def _positive_bound(cls, value: int | None) -> int | None:
        if value is not None and value < 1:
            raise ValueError("must be at least 1")
        return value


class ConfigError(Exception):
    """Raised when command-line settings cannot form a valid RunConfig."""
