"""
Conversation derivation pass.

Turns a snapshot of listings into the hub's conversation list:

  1. Code: group each listing's availability into stays
  2. Code: classify every stay against `today`
  3. Code: synthesize a thread + preview, drop what cannot be dated

The pass is idempotent: it recomputes everything from the snapshot and
never looks at the previous result.
"""

import logging
from datetime import date

from guesthub.domain.chat import Chat, synthesize_chat
from guesthub.domain.listing import Listing
from guesthub.domain.stay import aggregate_stays

log = logging.getLogger(__name__)


def build_chats(listings: list[Listing], today: date) -> list[Chat]:
    """Derive one chat per stay across all listings, in listing order."""
    chats: list[Chat] = []
    stays_seen = 0

    for listing in listings:
        if not listing.availability:
            continue

        stays = aggregate_stays(listing)
        stays_seen += len(stays)
        for stay in stays.values():
            chat = synthesize_chat(stay, today)
            if chat is not None and chat.messages:
                chats.append(chat)

    log.info(
        "Derived %d chat(s) from %d stay(s) across %d listing(s), %d dropped",
        len(chats), stays_seen, len(listings), stays_seen - len(chats),
    )
    return chats
