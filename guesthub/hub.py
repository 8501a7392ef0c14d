"""
GuestHub — the state behind the guest hub screen.

Owns the conversation registry, the booking request list and the reply
draft, and relays the host's actions to the dashboard backend:

  refresh()                 listings → conversations (synchronous)
  send_message()            POST /messages/send
  regenerate_suggestions()  POST /messages/regenerate
  request_action()          POST /requests/update, then approve/decline

Actions are awaited one after another and return a HubResult whose
`notice` is the confirmation shown to the host.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Literal

from guesthub.adapters.ports import DashboardGateway
from guesthub.conversations import build_chats
from guesthub.domain.booking_request import (
    SAMPLE_REQUESTS,
    BookingRequest,
    BookingRequestList,
    RequestAction,
)
from guesthub.domain.chat import Chat
from guesthub.domain.listing import Listing
from guesthub.domain.registry import ConversationRegistry
from guesthub.domain.suggestions import ReplySuggester

log = logging.getLogger(__name__)


@dataclass
class HubConfig:
    gateway: DashboardGateway
    suggester: ReplySuggester
    seed_requests: list[BookingRequest] = field(default_factory=lambda: list(SAMPLE_REQUESTS))
    auto_reply_enabled: bool = True


@dataclass
class HubResult:
    action: Literal[
        "message_sent",
        "suggestions_regenerated",
        "request_updated",
        "request_unchanged",  # no longer pending
        "request_not_found",
    ]
    notice: str = ""
    details: str = ""


class GuestHub:
    """One host session's view of conversations and booking requests."""

    def __init__(self, config: HubConfig):
        self._cfg = config
        self.registry = ConversationRegistry()
        self.requests = BookingRequestList()
        self.requests.seed(config.seed_requests)
        self.reply_text = ""
        self.auto_reply_enabled = config.auto_reply_enabled
        self.suggestions: list[str] = config.suggester.suggest(None)

    # -- conversations -------------------------------------------------------

    @property
    def chats(self) -> list[Chat]:
        return self.registry.chats

    @property
    def selected_chat(self) -> Chat | None:
        return self.registry.selected_chat

    def refresh(self, listings: list[Listing], today: date | None = None) -> list[Chat]:
        """Rebuild conversations from a full listings snapshot."""
        chats = build_chats(listings, today or date.today())
        self.registry.replace_all(chats)
        return chats

    def select_chat(self, chat_id: str) -> Chat:
        chat = self.registry.find(chat_id)
        if chat is None:
            raise KeyError(chat_id)
        self.registry.select(chat)
        self.suggestions = self._cfg.suggester.suggest(chat)
        return chat

    # -- reply draft ---------------------------------------------------------

    def apply_suggestion(self, suggestion: str) -> None:
        self.reply_text = suggestion

    def set_auto_reply(self, enabled: bool) -> None:
        self.auto_reply_enabled = enabled

    async def send_message(self) -> HubResult:
        chat = self.selected_chat
        await self._cfg.gateway.send_request(
            "/messages/send",
            {"chatId": chat.id if chat else None, "message": self.reply_text},
        )
        log.info("chat=%s message sent: %.60s", chat.id if chat else "-", self.reply_text)
        sent = self.reply_text
        self.reply_text = ""
        return HubResult(action="message_sent", notice="Message sent successfully", details=sent)

    async def regenerate_suggestions(self) -> HubResult:
        chat = self.selected_chat
        await self._cfg.gateway.send_request(
            "/messages/regenerate",
            {"chatId": chat.id if chat else None},
        )
        self.suggestions = self._cfg.suggester.suggest(chat)
        return HubResult(
            action="suggestions_regenerated",
            notice="New suggestions generated",
            details=f"{len(self.suggestions)} suggestion(s)",
        )

    # -- booking requests ----------------------------------------------------

    async def request_action(self, request_id: str, action: RequestAction) -> HubResult:
        if action not in ("approve", "decline"):
            raise ValueError(f"Unknown request action: {action!r}")

        current = self.requests.get(request_id)
        if current is None:
            return HubResult(
                action="request_not_found",
                notice=f"Request {request_id} not found",
                details="not found",
            )
        if current.status != "pending":
            log.warning("req=%s cannot %s: status is already %s", request_id, action, current.status)
            return HubResult(
                action="request_unchanged",
                notice=f"Request {request_id} is already {current.status}",
                details=current.status,
            )

        await self._cfg.gateway.send_request(
            "/requests/update",
            {"requestId": request_id, "action": action},
        )
        updated = self.requests.transition(request_id, action)
        return HubResult(
            action="request_updated",
            notice=f"Request {action}d successfully",
            details=updated.status,
        )
