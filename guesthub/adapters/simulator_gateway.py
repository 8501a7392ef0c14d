import asyncio
import logging

from .ports import DashboardGateway

log = logging.getLogger(__name__)


class SimulatorDashboardGateway(DashboardGateway):
    """
    In-memory stand-in for the dashboard backend. Every call succeeds.

    Test helpers:
        sent  — list of (path, payload) tuples recorded by send_request()
    """

    def __init__(self, delay: float = 0.5):
        self._delay = delay
        self.sent: list[tuple[str, dict]] = []

    async def send_request(self, path: str, payload: dict) -> None:
        if self._delay:
            await asyncio.sleep(self._delay)
        self.sent.append((path, dict(payload)))
        log.debug("simulated %s %r", path, payload)
