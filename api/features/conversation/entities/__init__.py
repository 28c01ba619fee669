from api.features.conversation.entities.chat import Chat

__all__ = ["Chat"]
