import pytest


class FakeBackend:
    """Stands in for GenerativeBackend; records what it was asked."""

    def __init__(self, reply="Claro, entendido.", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    @property
    def configured(self):
        return True

    def generate(self, message):
        self.calls.append(message)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def server(monkeypatch, fake_backend):
    """The Flask module with its backend swapped for a fake."""
    import app as server_module
    monkeypatch.setattr(server_module, "backend", fake_backend)
    return server_module


@pytest.fixture
def client(server):
    server.app.config["TESTING"] = True
    return server.app.test_client()
