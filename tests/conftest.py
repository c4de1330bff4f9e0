"""Shared pytest fixtures for orderctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from orderctl.config import shared
from orderctl.config.shared import SharedConfiguration
from orderctl.domain.customer import Customer
from orderctl.domain.products import DigitalProduct, PhysicalProduct


@pytest.fixture(autouse=True)
def _fresh_shared_configuration(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Drop the process-wide configuration so every test starts from defaults."""
    monkeypatch.setattr(shared, "_instance", None)
    monkeypatch.delenv("ORDERCTL_CONFIG", raising=False)
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no orderctl.toml is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config() -> SharedConfiguration:
    """An independent configuration handle with default values."""
    return SharedConfiguration()


@pytest.fixture
def customer() -> Customer:
    return Customer(id="CLI1", name="Ana Silva", email="ana.silva@example.com")


@pytest.fixture
def book() -> PhysicalProduct:
    return PhysicalProduct(name="Book", price="10.00", weight="1.2")


@pytest.fixture
def ebook() -> DigitalProduct:
    return DigitalProduct(name="Ebook", price="5.00", download_url="https://example.com/ebook.pdf")
