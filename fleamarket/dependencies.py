from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from fleamarket.core.config import settings
from fleamarket.core.errors import ForbiddenError
from fleamarket.core.security import password_hasher, token_issuer, validate_token
from fleamarket.db.models import User, UserTier
from fleamarket.db.repositories import UserRepository, ItemRepository
from fleamarket.db.session import get_db
from fleamarket.services import AuthService, ItemService

# auto_error=False: a missing header must surface as our 401, not FastAPI's 403
security = HTTPBearer(auto_error=False)

def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
	return UserRepository(db)

def get_item_repository(db: Session = Depends(get_db)) -> ItemRepository:
	return ItemRepository(db)

def get_auth_service(users: UserRepository = Depends(get_user_repository)) -> AuthService:
	return AuthService(users, password_hasher, token_issuer)

def get_item_service(items: ItemRepository = Depends(get_item_repository)) -> ItemService:
	return ItemService(items)

def get_current_user(
	request: Request,
	creds: Optional[HTTPAuthorizationCredentials] = Depends(security),
	users: UserRepository = Depends(get_user_repository),
) -> User:
	token = creds.credentials if creds else None
	user = validate_token(token, users, token_issuer)
	request.state.user = user
	return user

def require_tier(*allowed_tiers: UserTier):
	"""Restrict a route to the given tiers; no tiers means any authenticated user."""
	allowed = {UserTier(tier) for tier in allowed_tiers}

	def _tier_guard(user: User = Depends(get_current_user)) -> User:
		if allowed and user.tier not in allowed:
			raise ForbiddenError("Your account tier cannot perform this action")
		return user
	return _tier_guard

def item_creator(user: User = Depends(get_current_user)) -> User:
	# Allowed tiers are read per request
	return require_tier(*settings.ITEM_CREATE_TIERS)(user)
