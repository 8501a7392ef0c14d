"""
StaticReplySuggester — the fixed set of canned replies offered to the host.
"""

from guesthub.domain.chat import Chat
from guesthub.domain.suggestions import ReplySuggester

STATIC_SUGGESTIONS = [
    "Thank you for your message! Check-in is at 3:00 PM. I'll send you detailed "
    "instructions closer to your arrival date.",
    "Yes, free parking is included with your reservation. There's a dedicated spot "
    "right in front of the property.",
    "I appreciate your inquiry! The property accommodates up to 4 guests comfortably.",
]


class StaticReplySuggester(ReplySuggester):

    def __init__(self, suggestions: list[str] | None = None):
        self._suggestions = list(suggestions or STATIC_SUGGESTIONS)

    def suggest(self, chat: Chat | None) -> list[str]:
        return list(self._suggestions)
