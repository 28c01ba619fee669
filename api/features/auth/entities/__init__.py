from api.features.auth.entities.account import Account

__all__ = ["Account"]
