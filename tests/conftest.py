import functools

import httpx
import pytest

from tfs_rest import client as client_module
from tfs_rest.config import TfsConnection

COLLECTION = "https://tfs.example.com/tfs/DefaultCollection"


@pytest.fixture
def conn():
    return TfsConnection(
        collection_url=COLLECTION + "/",
        project="Fabrikam",
        credential="secret-pat",
    )


def json_response(payload, status_code=200):
    return httpx.Response(status_code, json=payload)


class FakeClock:
    """Monotonic clock that only moves when sleep() is called."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def mock_tfs(monkeypatch):
    """
    Route every request through ``handler`` instead of the network.

    Returns the list the issued requests are recorded into.
    """
    sent = []

    def install(handler):
        def recording(request):
            sent.append(request)
            return handler(request)

        monkeypatch.setattr(
            client_module,
            "open_client",
            functools.partial(client_module.open_client, transport=httpx.MockTransport(recording)),
        )
        return sent

    return install


@pytest.fixture
def respond_with(mock_tfs):
    """Answer requests with the given payloads, one per request, in order."""

    def install(*payloads):
        queue = list(payloads)

        def handler(request):
            payload = queue.pop(0)
            if isinstance(payload, httpx.Response):
                return payload
            return json_response(payload)

        return mock_tfs(handler)

    return install
