"""Global pytest configuration and fixtures."""

from logging import Logger
from unittest.mock import MagicMock

import pytest

from tablekit import setup_test_logging
from tablekit.db import Adapter, Table
from tablekit.types import ColumnType


@pytest.fixture(scope="session", autouse=True)
def setup_logging(tmp_path_factory: pytest.TempPathFactory) -> None:
    """Setup test logging for all tests."""
    setup_test_logging(log_dir=tmp_path_factory.mktemp("logs"))


@pytest.fixture(scope="function")
def logger() -> Logger:
    """Provide a logger instance for tests."""
    from tablekit import get_logger

    return get_logger("test")


@pytest.fixture
def mock_adapter() -> MagicMock:
    """Create a mock adapter supporting the common column types."""
    adapter = MagicMock(spec=Adapter)
    adapter.get_column_types.return_value = {t.value for t in ColumnType}
    adapter.has_table.return_value = False
    adapter.has_column.return_value = False
    adapter.has_index.return_value = False
    return adapter


@pytest.fixture
def table(mock_adapter: MagicMock) -> Table:
    """Create a table bound to the mock adapter."""
    return Table("orders", {"engine": "InnoDB"}, mock_adapter)
