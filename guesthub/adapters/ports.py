from abc import ABC, abstractmethod


class DashboardGateway(ABC):
    """
    Port: the backend behind the hub's outbound actions.

    Used for "/messages/send", "/messages/regenerate" and "/requests/update".
    The hub awaits each call and ignores its result.
    """

    @abstractmethod
    async def send_request(self, path: str, payload: dict) -> None:
        """Deliver one action to the backend."""
        ...
