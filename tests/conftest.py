"""Test configuration and fixtures for salesreport."""

import logging
import tempfile
from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest

from salesreport.modules.report import SalesReportBuilder


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> Path:
    """Point the home directory at a temp dir and clear salesreport env vars."""
    monkeypatch.setattr(Path, "home", lambda: temp_dir)
    monkeypatch.delenv("SALESREPORT_VERBOSE", raising=False)
    monkeypatch.delenv("SALESREPORT_LOOKBACK_DAYS", raising=False)
    return temp_dir


@pytest.fixture(autouse=True)
def restore_package_logger() -> Generator[logging.Logger, None, None]:
    """Undo level and handler changes made to the salesreport logger."""
    logger = logging.getLogger("salesreport")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def global_config_file(temp_dir: Path) -> Path:
    """Return the global config path, creating its directory."""
    config_dir = temp_dir / ".salesreport"
    config_dir.mkdir()
    return config_dir / "config.yml"


@pytest.fixture
def january() -> tuple[date, date]:
    """The January 2024 reporting period."""
    return date(2024, 1, 1), date(2024, 1, 31)


@pytest.fixture
def builder() -> SalesReportBuilder:
    """A fresh builder for the monthly PDF report."""
    return SalesReportBuilder("Vendas Mensais", "PDF")
