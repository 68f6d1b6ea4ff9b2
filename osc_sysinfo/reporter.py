from __future__ import annotations

import asyncio
import logging

from osc_sysinfo.formatting import MessageFormatter
from osc_sysinfo.osc.sender import OscSender
from osc_sysinfo.sampler import MetricsSampler

logger = logging.getLogger(__name__)


class StatusReporter:
    """Sample → format → send, once per interval.

    Runs on a single event loop; the sleep between ticks is the only
    suspension point. A failing tick is logged and the loop carries on.
    """

    def __init__(
        self,
        sampler: MetricsSampler,
        formatter: MessageFormatter,
        sender: OscSender,
        interval: float = 3.0,
    ) -> None:
        self._sampler = sampler
        self._formatter = formatter
        self._sender = sender
        self.interval = interval
        self._running = False
        self._task: asyncio.Task | None = None
        self.ticks = 0

    # ── lifecycle ────────────────────────────────────────

    async def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._task = asyncio.create_task(self.run())
        logger.info("Reporter started (interval=%.1fs)", self.interval)

    async def stop(self) -> None:
        if not self._running and self._task is None:
            return
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("Reporter stopped after %d tick(s)", self.ticks)

    async def run(self, max_ticks: int | None = None) -> None:
        """Loop until stopped, cancelled, or ``max_ticks`` ticks are done."""
        self._running = True
        done = 0
        try:
            while self._running and (max_ticks is None or done < max_ticks):
                await asyncio.sleep(self.interval)
                try:
                    await self.tick()
                except asyncio.CancelledError:
                    raise
                except Exception:
                    logger.exception("Reporter error during tick")
                done += 1
        finally:
            self._running = False

    # ── one iteration ───────────────────────────────────

    async def tick(self) -> str | None:
        """Send one message; returns the text sent, or None if nothing went out."""
        self.ticks += 1
        snapshot = await self._sampler.sample()
        text = self._formatter.format(snapshot)
        if not text:
            logger.debug("No sections enabled, nothing to send")
            return None
        if not self._sender.send(text):
            return None
        logger.info("Sent: %r", text)
        return text

    @property
    def running(self) -> bool:
        return self._running
