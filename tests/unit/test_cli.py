"""
Tests des commandes CLI typer.
"""

import pytest
from dependency_injector import providers
from typer.testing import CliRunner

from src import main
from src.core.errors import ProviderUnavailable
from tests.fixtures.provider_responses import GEOCODE_RESPONSE

runner = CliRunner()


@pytest.fixture
def cli_container(test_settings, mock_fetcher):
    """Container du module CLI pointe sur une base temporaire."""
    main.container.config.override(providers.Object(test_settings))
    main.container.http_fetcher.override(providers.Object(mock_fetcher))
    yield main.container
    main.container.reset_override()
    main.container.reset_singletons()


def test_version():
    result = runner.invoke(main.app, ["version"])

    assert result.exit_code == 0
    assert main.__version__ in result.output


def test_info(cli_container):
    result = runner.invoke(main.app, ["info"])

    assert result.exit_code == 0
    assert "sqlite:///" in result.output
    assert "activée" in result.output


def test_location(cli_container, mock_fetcher):
    mock_fetcher.fetch_json.return_value = GEOCODE_RESPONSE

    result = runner.invoke(main.app, ["location", "seattle"])

    assert result.exit_code == 0
    mock_fetcher.fetch_json.assert_awaited_once()


def test_location_provider_error(cli_container, mock_fetcher):
    mock_fetcher.fetch_json.side_effect = ProviderUnavailable("google-geocode", "HTTP 403")

    result = runner.invoke(main.app, ["location", "seattle"])

    assert result.exit_code == 1
    assert "Erreur" in result.output


def test_fetch_unknown_resource():
    result = runner.invoke(main.app, ["fetch", "restaurants", "seattle"])

    assert result.exit_code == 2
