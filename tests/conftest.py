from pathlib import Path

import pytest

# Suite directory name -> marker; the first match in the path wins
_SUITES = ("domain", "application", "bdd", "integration")


def pytest_collection_modifyitems(config, items):
    for item in items:
        suite = next((part for part in Path(item.fspath).parts if part in _SUITES), None)
        if suite is None:
            continue
        item.add_marker(getattr(pytest.mark, suite))
        # HTTP round-trips through TestClient
        if suite == "integration" and item.get_closest_marker("fast") is None:
            item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def run_around_tests(monkeypatch):
    """Isolate every test from the environment and from registry singletons."""
    for name in ("LOGISTICS_ENV", "LOGISTICS_SERVER_URL"):
        monkeypatch.delenv(name, raising=False)

    yield

    from logistics.config import reset_config, reset_notify_credentials
    from logistics.notifications import reset_notification_handler

    reset_config()
    reset_notify_credentials()
    reset_notification_handler()
