from __future__ import annotations

import socket

import pytest
from pythonosc.osc_message import OscMessage


class UdpListener:
    """Loopback UDP socket that decodes incoming OSC messages."""

    def __init__(self) -> None:
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.sock.bind(("127.0.0.1", 0))
        self.sock.settimeout(2.0)
        self.host, self.port = self.sock.getsockname()

    def receive(self) -> OscMessage:
        data, _ = self.sock.recvfrom(65535)
        return OscMessage(data)

    def pending(self) -> list[OscMessage]:
        """Drain everything already queued without blocking."""
        messages = []
        self.sock.setblocking(False)
        try:
            while True:
                data, _ = self.sock.recvfrom(65535)
                messages.append(OscMessage(data))
        except BlockingIOError:
            pass
        finally:
            self.sock.settimeout(2.0)
        return messages

    def close(self) -> None:
        self.sock.close()


@pytest.fixture
def udp_listener():
    listener = UdpListener()
    yield listener
    listener.close()
