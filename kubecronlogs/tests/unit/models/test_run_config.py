"""Tests for RunConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kubecronlogs.models.state.run_config import RunConfig


class TestRunConfig:
    """Tests for RunConfig validation."""

    def test_defaults(self) -> None:
        config = RunConfig(name="nightly")
        assert config.namespace == "default"
        assert config.container is None
        assert config.follow is False
        assert config.timestamps is False
        assert config.max_concurrent_streams is None

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RunConfig(name="   ")

    def test_blank_container_becomes_none(self) -> None:
        assert RunConfig(name="nightly", container=" ").container is None

    def test_stream_bound_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            RunConfig(name="nightly", max_concurrent_streams=0)

    def test_frozen(self) -> None:
        config = RunConfig(name="nightly")
        with pytest.raises(ValidationError):
            config.follow = True  # type: ignore[misc]
