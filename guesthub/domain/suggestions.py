"""
ReplySuggester port — proposes replies the host can drop into the draft.
"""

from abc import ABC, abstractmethod

from guesthub.domain.chat import Chat


class ReplySuggester(ABC):
    """
    Port: suggest host replies for a conversation.

    Suggestions are only offered; the host decides what is actually sent.
    """

    @abstractmethod
    def suggest(self, chat: Chat | None) -> list[str]:
        """Return reply suggestions for the given chat (None: no chat selected)."""
        ...
