"""
Console runner for the guest hub.

Loads listings from the configured source, derives conversations and
prints them together with the booking requests.

Usage (from project root):
    python scripts/run.py                     # list conversations
    python scripts/run.py show CHAT_ID        # show one conversation
    python scripts/run.py requests            # list booking requests
    python scripts/run.py approve REQ_ID      # approve a pending request
    python scripts/run.py decline REQ_ID      # decline a pending request
    python scripts/run.py watch               # refresh every REFRESH_INTERVAL s

Environment variables:
    LISTINGS_SOURCE     - "memory", "file" or "http" (default: memory)
    LISTINGS_FILE       - JSON listings snapshot (when LISTINGS_SOURCE=file)
    LISTINGS_API_URL    - backend base URL (when LISTINGS_SOURCE=http)
    LISTINGS_API_KEY    - optional bearer token for the backend
    GATEWAY_DELAY       - simulated backend delay in seconds (default: 0.5)
    REFRESH_INTERVAL    - seconds between refreshes in watch mode (default: 60)
"""

import asyncio
import logging
import os
import sys
import textwrap

# Make sure project root is on sys.path when run as a script
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from guesthub.adapters.simulator_gateway import SimulatorDashboardGateway
from guesthub.adapters.static_suggestions import StaticReplySuggester
from guesthub.domain.listing import ListingSource
from guesthub.factory import create_listing_source
from guesthub.hub import GuestHub, HubConfig
from guesthub.refresh import refresh_once

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
log = logging.getLogger(__name__)


_SOURCE_REQUIRED_ENV = {
    "http": ["LISTINGS_API_URL"],
    "file": ["LISTINGS_FILE"],
}


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        print(f"ERROR: environment variable {name!r} is not set.", file=sys.stderr)
        sys.exit(1)
    return value


def build_listing_source() -> ListingSource:
    kind = os.environ.get("LISTINGS_SOURCE", "memory")
    for name in _SOURCE_REQUIRED_ENV.get(kind, []):
        _require_env(name)
    return create_listing_source(kind)


def _wrap(text: str, width: int = 72, indent: str = "    ") -> str:
    return textwrap.fill(text, width=width, initial_indent=indent, subsequent_indent=indent)


def build_hub() -> GuestHub:
    delay = float(os.environ.get("GATEWAY_DELAY", "0.5"))
    return GuestHub(HubConfig(
        gateway=SimulatorDashboardGateway(delay=delay),
        suggester=StaticReplySuggester(),
    ))


def list_chats(hub: GuestHub) -> None:
    if not hub.chats:
        print("No conversations.")
        return

    selected = hub.selected_chat
    print(f"\n   {'Chat':<36}  {'Platform':<10}  Preview")
    print("-" * 80)
    for chat in hub.chats:
        marker = "*" if selected is not None and chat.id == selected.id else " "
        print(f"{marker}  {chat.id:<36}  {chat.platform:<10}  {chat.preview[:40]}")
    print()


def show_chat(hub: GuestHub, chat_id: str) -> None:
    try:
        chat = hub.select_chat(chat_id)
    except KeyError:
        print(f"Chat {chat_id!r} not found.")
        return

    print(f"\n{'=' * 60}")
    print(f"  {chat.guest_name}  |  {chat.platform}  |  {'Auto' if chat.is_auto else 'Manual'}")
    print(f"{'=' * 60}")
    for msg in chat.messages:
        print(f"  [{msg.sender}] {msg.display_timestamp}")
        print(_wrap(msg.text))
    print("\n  Suggestions:")
    for i, suggestion in enumerate(hub.suggestions, 1):
        print(f"  {i}.")
        print(_wrap(suggestion, indent="      "))
    print()


def list_requests(hub: GuestHub) -> None:
    print(f"\n{'ID':<6}  {'Guest':<16}  {'Platform':<8}  {'Dates':<23}  {'Price':>6}  Status")
    print("-" * 80)
    for req in hub.requests:
        dates = f"{req.check_in.isoformat()} → {req.check_out.isoformat()}"
        badge = req.platform_specific.badge() if req.platform_specific else None
        print(
            f"{req.id:<6}  {req.guest_name:<16}  {req.platform:<8}  {dates:<23}  "
            f"${req.total_price:>5}  {req.status}" + (f"  ({badge})" if badge else "")
        )
    print()


async def watch(hub: GuestHub) -> None:
    source = build_listing_source()
    interval = int(os.environ.get("REFRESH_INTERVAL", "60"))
    log.info("Watching listings — interval=%ds", interval)
    while True:
        count = refresh_once(hub, source)
        log.info("%d conversation(s)", count)
        await asyncio.sleep(interval)


async def main(argv: list[str]) -> None:
    hub = build_hub()
    command = argv[0] if argv else "list"

    if command == "watch":
        await watch(hub)
        return

    if command in ("approve", "decline"):
        if len(argv) < 2:
            print(f"Usage: run.py {command} REQ_ID", file=sys.stderr)
            sys.exit(1)
        result = await hub.request_action(argv[1], command)
        print(f"{result.notice} ({result.details})")
        list_requests(hub)
        return

    if command == "requests":
        list_requests(hub)
        return

    refresh_once(hub, build_listing_source())
    if command == "show" and len(argv) >= 2:
        show_chat(hub, argv[1])
    elif command == "list":
        list_chats(hub)
    else:
        print(__doc__)
        sys.exit(1)


if __name__ == "__main__":
    try:
        asyncio.run(main(sys.argv[1:]))
    except KeyboardInterrupt:
        log.info("Stopped.")
