from fleamarket.core.errors import UnauthorizedError
from fleamarket.core.security import PasswordHasher, TokenIssuer
from fleamarket.db.models import User
from fleamarket.db.repositories import UserRepository
from fleamarket.schemas.auth import SignUpRequest, SignInRequest

INVALID_CREDENTIALS = "Check your username or password"

class AuthService:
	def __init__(self, users: UserRepository, hasher: PasswordHasher, tokens: TokenIssuer):
		self.users = users
		self.hasher = hasher
		self.tokens = tokens

	def sign_up(self, payload: SignUpRequest) -> User:
		password_hash = self.hasher.hash(payload.password)
		return self.users.create_user(payload.username, password_hash, payload.tier)

	def sign_in(self, payload: SignInRequest) -> dict:
		user = self.users.find_one(username=payload.username)
		# Unknown users still pay for a bcrypt check so timing does not reveal them
		password_hash = user.password_hash if user else self.hasher.dummy_hash()
		valid = self.hasher.verify(payload.password, password_hash)
		if not user or not valid:
			raise UnauthorizedError(INVALID_CREDENTIALS)

		access_token = self.tokens.sign({"id": user.id, "username": user.username})
		return {"access_token": access_token, "token_type": "bearer"}
