"""Shared pytest fixtures for domain_guard tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
import structlog

from domain_guard import yaml_config


@pytest.fixture(autouse=True)
def _reset_config_and_logging() -> Generator[None]:
    """Drop the cached config.yml and any structlog configuration."""
    yaml_config.reset_cache()
    yield
    yaml_config.reset_cache()
    structlog.reset_defaults()


