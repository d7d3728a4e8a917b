from .types import AIClient, ChatMessage, Completion

__all__ = ["AIClient", "ChatMessage", "Completion"]
