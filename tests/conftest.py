import pytest
from click.testing import CliRunner


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def warnings_seen() -> list[str]:
    """Collects messages passed to a splitter's warn callback."""
    return []
