"""ORM models; importing this package registers every table on ``Base.metadata``."""

from reqbot.repositories.interactions.models.projects_model import Project
from reqbot.repositories.interactions.models.chat_messages_model import ChatMessage

__all__ = ["Project", "ChatMessage"]
