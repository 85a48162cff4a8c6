import pytest
from click.testing import CliRunner

from bech32codec.charset import reverse_map


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "cli: Command line interface tests")


@pytest.fixture
def runner():
    """A click test runner for invoking the CLI in-process."""
    return CliRunner()


@pytest.fixture(autouse=True)
def rebuild_symbol_table():
    """Each test starts with the lazily built reverse map not yet constructed."""
    reverse_map.cache_clear()
    yield
