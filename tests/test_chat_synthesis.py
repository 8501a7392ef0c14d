"""
Classification and thread synthesis tests.

`today` is always fixed so the tests never depend on the clock.
"""

import logging
from datetime import date, datetime, timedelta

import pytest

from guesthub.domain.chat import (
    PAST_PREVIEW,
    ChatMessage,
    classify_stay,
    parse_check_in,
    synthesize_chat,
)
from guesthub.domain.stay import Stay

TODAY = date(2026, 3, 10)


def _stay(days_ahead: int, nights: int = 3, is_past: bool = False, check_in: str | None = None):
    start = TODAY + timedelta(days=days_ahead)
    return Stay(
        guest_name="Sophie",
        platform="airbnb",
        check_in=check_in if check_in is not None else start.isoformat(),
        guests=3,
        property_title="Le Matisse",
        is_past=is_past,
        dates=[(start + timedelta(days=i)).isoformat() for i in range(nights)],
    )


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("days_ahead,expected", [
    (-30, "past"),
    (-1, "past"),
    (0, "imminent"),
    (1, "imminent"),
    (7, "imminent"),
    (8, "distant"),
    (90, "distant"),
])
def test_classification_by_days_ahead(days_ahead, expected):
    stay = _stay(days_ahead)
    check_in = TODAY + timedelta(days=days_ahead)
    assert classify_stay(stay, check_in, TODAY) == expected


def test_past_flag_wins_over_future_check_in():
    stay = _stay(20, is_past=True)
    assert classify_stay(stay, TODAY + timedelta(days=20), TODAY) == "past"


# ---------------------------------------------------------------------------
# Date parsing
# ---------------------------------------------------------------------------


def test_parse_iso_date():
    assert parse_check_in("2026-04-01") == date(2026, 4, 1)


def test_parse_iso_datetime_truncates():
    assert parse_check_in("2026-04-01T15:00:00") == date(2026, 4, 1)


@pytest.mark.parametrize("raw", ["", "not-a-date", "2026-13-45", None])
def test_parse_invalid(raw):
    assert parse_check_in(raw) is None


def test_invalid_check_in_is_dropped_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="guesthub.domain.chat"):
        assert synthesize_chat(_stay(5, check_in="soon"), TODAY) is None
    assert "Invalid check-in date" in caplog.text


# ---------------------------------------------------------------------------
# Past threads
# ---------------------------------------------------------------------------


def test_past_thread_shape():
    chat = synthesize_chat(_stay(-10, nights=4), TODAY)
    assert chat is not None
    assert [m.sender for m in chat.messages] == ["guest", "host"]
    assert chat.preview == PAST_PREVIEW
    assert "Le Matisse" in chat.messages[0].text


def test_past_thread_timestamps_follow_stay_length():
    chat = synthesize_chat(_stay(-10, nights=4), TODAY)
    check_in = TODAY - timedelta(days=10)
    assert chat.messages[0].timestamp == datetime.combine(check_in + timedelta(days=4), datetime.min.time())
    assert chat.messages[1].timestamp - chat.messages[0].timestamp == timedelta(days=1)


def test_flagged_past_with_future_check_in_gets_thank_you():
    chat = synthesize_chat(_stay(12, is_past=True), TODAY)
    assert chat.preview == PAST_PREVIEW
    assert len(chat.messages) == 2


# ---------------------------------------------------------------------------
# Imminent threads
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("days_ahead", [1, 3, 7])
def test_imminent_thread_shape(days_ahead):
    chat = synthesize_chat(_stay(days_ahead), TODAY)
    assert [m.sender for m in chat.messages] == ["guest", "host", "guest", "host"]
    assert chat.preview == chat.messages[0].text
    assert "What time is check-in?" in chat.preview


def test_imminent_thread_timestamps():
    chat = synthesize_chat(_stay(5), TODAY)
    check_in = TODAY + timedelta(days=5)
    days_before = [(check_in - m.timestamp.date()).days for m in chat.messages]
    assert days_before == [3, 3, 2, 2]


def test_same_day_check_in_is_imminent():
    chat = synthesize_chat(_stay(0), TODAY)
    assert chat is not None
    assert len(chat.messages) == 4


# ---------------------------------------------------------------------------
# Distant threads
# ---------------------------------------------------------------------------


def test_distant_thread_shape():
    chat = synthesize_chat(_stay(8), TODAY)
    assert [m.sender for m in chat.messages] == ["guest", "host"]
    assert chat.preview == chat.messages[0].text


def test_distant_confirmation_text():
    chat = synthesize_chat(_stay(20), TODAY)
    assert chat.preview == (
        "Hi! Just wanted to confirm our reservation for March 30 at Le Matisse. "
        "We're 3 guests. Looking forward to it!"
    )
    check_in = TODAY + timedelta(days=20)
    assert all(m.timestamp.date() == check_in - timedelta(days=14) for m in chat.messages)


# ---------------------------------------------------------------------------
# Chat identity
# ---------------------------------------------------------------------------


def test_chat_identity_fields():
    chat = synthesize_chat(_stay(3), TODAY)
    assert chat.id == "chat-Sophie-airbnb"
    assert chat.guest_name == "Sophie"
    assert chat.platform == "airbnb"
    assert chat.is_auto is True


def test_synthesis_is_deterministic():
    assert synthesize_chat(_stay(9), TODAY) == synthesize_chat(_stay(9), TODAY)


def test_display_timestamp():
    msg = ChatMessage("Hi", "guest", datetime(2026, 10, 8, 0, 0))
    assert msg.display_timestamp == "Oct 08, 12:00 AM"
    msg = ChatMessage("Hi", "host", datetime(2026, 10, 8, 15, 5))
    assert msg.display_timestamp == "Oct 08, 3:05 PM"


# ---------------------------------------------------------------------------
# Out-of-range dates
# ---------------------------------------------------------------------------


def test_check_in_at_end_of_calendar_is_dropped(caplog):
    stay = _stay(0, check_in="9999-12-31", is_past=True)
    with caplog.at_level(logging.WARNING, logger="guesthub.domain.chat"):
        assert synthesize_chat(stay, TODAY) is None
    assert "out of range" in caplog.text


def test_check_in_at_start_of_calendar_is_dropped():
    stay = _stay(0, check_in="0001-01-02")
    assert synthesize_chat(stay, date(1, 1, 1)) is None
