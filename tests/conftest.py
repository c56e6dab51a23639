"""Pytest conftest module."""
import pytest
from typer import Typer
from typer.testing import CliRunner

from uri_builder.cli import make_app
from uri_builder.url import UrlBuilder

pytest.register_assert_rewrite("tests.helpers")


@pytest.fixture
def builder() -> UrlBuilder:
    """A builder with two sections and two parameters."""
    return UrlBuilder("http://example.com/a/b?x=1&y=2")


@pytest.fixture
def app() -> Typer:
    """A fresh CLI application."""
    return make_app()


@pytest.fixture
def runner() -> CliRunner:
    """Runs CLI commands in-process."""
    return CliRunner()
