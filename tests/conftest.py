import pytest

from folio import hooks
from folio.i18n.resolver import BrowserEnvironment


@pytest.fixture(autouse=True)
def _clean_hooks():
    """Isolate each test from handlers registered by another."""
    hooks.clear()
    yield
    hooks.clear()


@pytest.fixture
def storage():
    """In-memory stand-in for browser local storage."""
    return {}


@pytest.fixture
def browser_env(storage):
    return BrowserEnvironment(storage, path="/", storage_key="lang")
