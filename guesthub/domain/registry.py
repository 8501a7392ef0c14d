"""
ConversationRegistry — the hub's in-memory list of conversations.
"""

from guesthub.domain.chat import Chat


class ConversationRegistry:
    """
    Holds the current chats and the selected one.

    Replaced wholesale after every derivation pass, never merged.
    One registry per hub; there is no module-level instance.
    """

    def __init__(self):
        self._chats: list[Chat] = []
        self._selected: Chat | None = None

    @property
    def chats(self) -> list[Chat]:
        return list(self._chats)

    @property
    def selected_chat(self) -> Chat | None:
        return self._selected

    def replace_all(self, chats: list[Chat]) -> None:
        """Swap in a freshly derived list. An empty list changes nothing."""
        if not chats:
            return
        self._chats = list(chats)
        if self._selected is None:
            self._selected = self._chats[0]

    def select(self, chat: Chat) -> None:
        self._selected = chat

    def find(self, chat_id: str) -> Chat | None:
        return next((c for c in self._chats if c.id == chat_id), None)
