"""Pytest configuration and fixtures."""

import pytest
import structlog
from structlog.testing import capture_logs

from amounts.links import DisplayContext
from amounts.locale_config import LocaleConfig
from tests.helpers import ACCOUNT_RS, DE_DE, EN_US


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog.configure() done by the code under test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def en_locale() -> LocaleConfig:
    """en-US separators: 1,234.5"""
    return EN_US


@pytest.fixture
def de_locale() -> LocaleConfig:
    """de-DE separators: 1.234,5"""
    return DE_DE


@pytest.fixture
def contact_context() -> DisplayContext:
    """A directory with one named contact and nobody signed in."""
    return DisplayContext(contacts={ACCOUNT_RS: "foo"})


@pytest.fixture
def signed_in_context() -> DisplayContext:
    """The contact above is also the signed-in account."""
    return DisplayContext(contacts={ACCOUNT_RS: "foo"}, account_rs=ACCOUNT_RS)


@pytest.fixture
def captured_logs():
    """Capture structlog events emitted during a test."""
    with capture_logs() as logs:
        yield logs
