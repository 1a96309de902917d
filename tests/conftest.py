import io

import pytest


from chromansi import ansi


@pytest.fixture
def sink():
    """In-memory text stream standing in for the terminal."""
    return io.StringIO()


@pytest.fixture
def fresh_terminal(monkeypatch):
    """Reset the one-time terminal setup and count hook invocations."""
    calls = []
    monkeypatch.setattr(ansi, "_terminal_ready", False)
    monkeypatch.setattr(ansi, "_terminal_hook", lambda: calls.append(1))
    return calls
