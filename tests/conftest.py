import pytest
from wphtml import warning


@pytest.fixture(autouse=True)
def _wphtml_env(monkeypatch: pytest.MonkeyPatch):  # pyright: ignore[reportUnusedFunction]
	monkeypatch.setenv("WPHTML_MODE", "dev")
	yield
	for listener in warning.registered_listeners():
		warning.remove_listener(listener)
