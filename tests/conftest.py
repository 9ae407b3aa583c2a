import pytest
from click.testing import CliRunner

from markpage.converter import create_parser


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def md():
    """Provides a parser with the default extensions."""
    return create_parser()
