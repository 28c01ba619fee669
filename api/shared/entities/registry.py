"""Entity registry to ensure SQLAlchemy loads all table metadata.

Import all entity modules here so schema bootstrap can discover them.
"""
# Import base first to expose BaseEntity.metadata
from api.shared.entities.base import BaseEntity  # noqa: F401

# Feature: Auth
from api.features.auth.entities.account import Account  # noqa: F401

# Feature: Conversation
from api.features.conversation.entities.chat import Chat  # noqa: F401
