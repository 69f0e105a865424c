from typing import Optional

from pydantic import BaseModel, Field

from fleamarket.db.models import UserTier

class SignUpRequest(BaseModel):
	username: str = Field(min_length=1, max_length=50)
	password: str = Field(min_length=8, max_length=32, pattern=r"^[A-Za-z0-9]+$")
	tier: Optional[UserTier] = None

class SignInRequest(BaseModel):
	username: str
	password: str

class TokenResponse(BaseModel):
	access_token: str
	token_type: str = "bearer"

class UserOut(BaseModel):
	id: str
	username: str
	tier: UserTier

	class Config:
		from_attributes = True
