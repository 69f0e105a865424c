from fastapi import APIRouter, Depends, Request

from fleamarket.core.errors import UnauthorizedError
from fleamarket.core.logging import log_event
from fleamarket.db.models import User
from fleamarket.dependencies import get_auth_service, get_current_user
from fleamarket.schemas.auth import SignUpRequest, SignInRequest, TokenResponse, UserOut
from fleamarket.services import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/signup", response_model=UserOut, status_code=201)
def signup(request: Request, payload: SignUpRequest, auth: AuthService = Depends(get_auth_service)):
	user = auth.sign_up(payload)
	log_event("user_registered", user_id=user.id, username=user.username, tier=user.tier.value, request_id=request.state.request_id)
	return user

@router.post("/signin", response_model=TokenResponse)
def signin(request: Request, payload: SignInRequest, auth: AuthService = Depends(get_auth_service)):
	try:
		token = auth.sign_in(payload)
	except UnauthorizedError:
		log_event("login_failed", username=payload.username, request_id=request.state.request_id)
		raise
	log_event("user_login", username=payload.username, request_id=request.state.request_id)
	return token

@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_current_user)):
	return user
