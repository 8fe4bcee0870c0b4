"""Pytest configuration and fixtures for local_fs tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from local_fs.adapters.outbound import LocalFileSystem
from local_fs.application import FilesystemAdapter, reset_default_adapter
from local_fs.infrastructure.config import Config, IOConfig
from local_fs.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config() -> Config:
    """Provide a test configuration."""
    return Config(io=IOConfig(sync_mode="none", copy_permissions=True, sort_listings=True))


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def fs(test_config: Config, metrics_registry: MetricsRegistry) -> LocalFileSystem:
    """Provide a LocalFileSystem with isolated metrics."""
    return LocalFileSystem(io_config=test_config.io, metrics=metrics_registry)


@pytest.fixture
def adapter(fs: LocalFileSystem) -> Generator[FilesystemAdapter, None, None]:
    """Provide a boolean-result adapter over the isolated LocalFileSystem."""
    reset_default_adapter()
    yield FilesystemAdapter(fs)
    reset_default_adapter()


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
