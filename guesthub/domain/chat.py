"""
Stay classification and message thread synthesis.

Every stay becomes a short, deterministic conversation whose content
depends on where its check-in falls relative to `today`:

  past      — guest thanks the host after the stay
  imminent  — check-in within a week: check-in time and parking questions
  distant   — further out: guest confirms the reservation

`today` is always passed in; nothing here reads the clock.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Literal

from guesthub.domain.stay import Stay

log = logging.getLogger(__name__)

StayCategory = Literal["past", "imminent", "distant"]

IMMINENT_WINDOW_DAYS = 7
PAST_PREVIEW = "Thank you for the wonderful stay!"


@dataclass
class ChatMessage:
    text: str
    sender: Literal["guest", "host"]
    timestamp: datetime

    @property
    def display_timestamp(self) -> str:
        """e.g. "Oct 28, 12:00 AM"."""
        hour = self.timestamp.hour % 12 or 12
        return f"{self.timestamp:%b %d}, {hour}:{self.timestamp:%M %p}"


@dataclass
class Chat:
    id: str
    guest_name: str
    platform: str
    preview: str
    is_auto: bool = True
    messages: list[ChatMessage] = field(default_factory=list)


def chat_id(guest_name: str, platform: str) -> str:
    return f"chat-{guest_name}-{platform}"


def parse_check_in(raw: str) -> date | None:
    """Parse an ISO date (or datetime, truncated to its day). None if invalid."""
    try:
        return datetime.fromisoformat(raw).date()
    except (TypeError, ValueError):
        return None


def days_until(check_in: date, today: date) -> int:
    return (check_in - today).days


def classify_stay(stay: Stay, check_in: date, today: date) -> StayCategory:
    if stay.is_past or check_in < today:
        return "past"
    # Same-day arrivals count as imminent (0 days out).
    if days_until(check_in, today) <= IMMINENT_WINDOW_DAYS:
        return "imminent"
    return "distant"


def _at(day: date) -> datetime:
    return datetime.combine(day, time.min)


def _past_thread(stay: Stay, check_in: date) -> tuple[list[ChatMessage], str]:
    thanked_on = check_in + timedelta(days=len(stay.dates))
    messages = [
        ChatMessage(
            text=(
                f"Thank you so much for hosting us at {stay.property_title}! "
                f"We had a wonderful time."
            ),
            sender="guest",
            timestamp=_at(thanked_on),
        ),
        ChatMessage(
            text=(
                "Thank you for being such wonderful guests! We're so glad you "
                "enjoyed your stay. You're always welcome back!"
            ),
            sender="host",
            timestamp=_at(thanked_on + timedelta(days=1)),
        ),
    ]
    return messages, PAST_PREVIEW


def _imminent_thread(stay: Stay, check_in: date) -> tuple[list[ChatMessage], str]:
    three_before = _at(check_in - timedelta(days=3))
    two_before = _at(check_in - timedelta(days=2))
    question = (
        f"Hi! We're excited about our stay at {stay.property_title}. "
        f"What time is check-in?"
    )
    messages = [
        ChatMessage(text=question, sender="guest", timestamp=three_before),
        ChatMessage(
            text=(
                "Welcome! Check-in is at 3:00 PM. I'll send you the access code "
                "and detailed instructions 24 hours before your arrival. Is there "
                "anything specific you'd like to know?"
            ),
            sender="host",
            timestamp=three_before,
        ),
        ChatMessage(
            text="Perfect, thank you! Is parking available?",
            sender="guest",
            timestamp=two_before,
        ),
        ChatMessage(
            text=(
                "Yes, free parking is included! There's a dedicated spot right in "
                "front of the property. You'll find the parking details in the "
                "check-in instructions."
            ),
            sender="host",
            timestamp=two_before,
        ),
    ]
    return messages, question


def _distant_thread(stay: Stay, check_in: date) -> tuple[list[ChatMessage], str]:
    two_weeks_before = _at(check_in - timedelta(days=14))
    confirmation = (
        f"Hi! Just wanted to confirm our reservation for {check_in:%B %d} at "
        f"{stay.property_title}. We're {stay.guests} guests. Looking forward to it!"
    )
    messages = [
        ChatMessage(text=confirmation, sender="guest", timestamp=two_weeks_before),
        ChatMessage(
            text=(
                "Yes, your reservation is confirmed! We're looking forward to "
                "hosting you. I'll send check-in instructions about 3 days before "
                "your arrival. Feel free to reach out if you have any questions!"
            ),
            sender="host",
            timestamp=two_weeks_before,
        ),
    ]
    return messages, confirmation


_THREADS = {
    "past": _past_thread,
    "imminent": _imminent_thread,
    "distant": _distant_thread,
}


def synthesize_chat(stay: Stay, today: date) -> Chat | None:
    """
    Build the conversation for one stay, or None if the stay is dropped.

    A stay with an unparseable or out-of-range check-in is dropped with a
    warning; it must never break the conversation list.
    """
    check_in = parse_check_in(stay.check_in)
    if check_in is None:
        log.warning("Invalid check-in date for %s: %r", stay.key, stay.check_in)
        return None

    category = classify_stay(stay, check_in, today)
    try:
        messages, preview = _THREADS[category](stay, check_in)
    except OverflowError:
        log.warning("Check-in date out of range for %s: %r", stay.key, stay.check_in)
        return None
    if not messages:
        return None

    log.debug("%s → %s (%d messages)", stay.key, category, len(messages))
    return Chat(
        id=chat_id(stay.guest_name, stay.platform),
        guest_name=stay.guest_name,
        platform=stay.platform,
        preview=preview,
        is_auto=True,
        messages=messages,
    )
