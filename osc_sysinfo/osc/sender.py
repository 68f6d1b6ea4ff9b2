from __future__ import annotations

import logging

from pythonosc import udp_client

logger = logging.getLogger(__name__)


class OscSender:
    """Fire-and-forget OSC client for one destination and address.

    The UDP client is created on first send; a host that does not resolve
    yet fails that send and is retried on the next one.
    """

    def __init__(
        self,
        host: str,
        port: int,
        address: str = "/chatbox/input",
        immediate: bool = True,
    ) -> None:
        self.host = host
        self.port = port
        self.address = address
        self.immediate = immediate
        self._client: udp_client.SimpleUDPClient | None = None

    @property
    def client(self) -> udp_client.SimpleUDPClient:
        if self._client is None:
            self._client = udp_client.SimpleUDPClient(self.host, self.port)
        return self._client

    def send(self, text: str) -> bool:
        # VRChat's chat box takes (text, send-immediately)
        try:
            self.client.send_message(self.address, [text, self.immediate])
        except OSError as exc:
            logger.warning("Send to %s:%d failed: %s", self.host, self.port, exc)
            return False
        return True
