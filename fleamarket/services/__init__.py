from .auth_service import AuthService
from .item_service import ItemService

__all__ = ["AuthService", "ItemService"]
