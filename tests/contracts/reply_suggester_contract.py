"""
Adapter contract for ReplySuggester.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from guesthub.domain.chat import Chat, ChatMessage
from guesthub.domain.suggestions import ReplySuggester


def _chat() -> Chat:
    return Chat(
        id="chat-Sophie-airbnb",
        guest_name="Sophie",
        platform="airbnb",
        preview="Is parking available?",
        messages=[ChatMessage("Is parking available?", "guest", datetime(2026, 4, 1))],
    )


class ReplySuggesterContract(ABC):

    @abstractmethod
    def create_suggester(self) -> ReplySuggester:
        ...

    def test_suggestions_are_non_empty_strings(self):
        suggestions = self.create_suggester().suggest(_chat())
        assert suggestions
        assert all(isinstance(s, str) and s.strip() for s in suggestions)

    def test_no_chat_selected_still_suggests(self):
        suggestions = self.create_suggester().suggest(None)
        assert isinstance(suggestions, list)

    def test_returned_list_is_a_copy(self):
        suggester = self.create_suggester()
        first = suggester.suggest(_chat())
        first.clear()
        assert suggester.suggest(_chat())
