from __future__ import annotations

import pytest

from restclient.core.domain.models import TransportMessage, TransportReply
from restclient.core.services import client as client_mod


class RecordingTransport:
    """Fake transport: records every message and replies with a fixed answer."""

    def __init__(self, status=200, content=b"", headers=None, error=None):
        self.reply = TransportReply(status=status, content=content, headers=headers or {})
        self.error = error
        self.messages: list[TransportMessage] = []
        self.closed = False

    def send(self, message: TransportMessage) -> TransportReply:
        self.messages.append(message)
        if self.error is not None:
            raise self.error
        return self.reply

    def close(self):
        self.closed = True


@pytest.fixture
def make_transport():
    return RecordingTransport


@pytest.fixture(autouse=True)
def reset_default_client():
    client_mod.set_default_client(None)
    yield
    client_mod.set_default_client(None)
