import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from fleamarket.core.config import settings
from fleamarket.core.errors import UnauthorizedError


def _normalize_password(password: str) -> str:
	# bcrypt only considers the first 72 bytes; truncate consistently to avoid errors.
	raw = password.encode("utf-8")
	if len(raw) <= 72:
		return password
	return raw[:72].decode("utf-8", errors="ignore")


class PasswordHasher:
	"""Salted one-way hashing backed by passlib's bcrypt scheme."""

	def __init__(self, rounds: int = 12):
		self.pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)
		self._dummy_hash = None

	def hash(self, password: str) -> str:
		return self.pwd_context.hash(_normalize_password(password))

	def verify(self, password: str, password_hash: str) -> bool:
		try:
			return self.pwd_context.verify(_normalize_password(password), password_hash)
		except ValueError:
			# Stored value is not a recognisable hash
			return False

	def dummy_hash(self) -> str:
		"""A real hash of a random secret, for equal-cost checks when no user exists."""
		if self._dummy_hash is None:
			self._dummy_hash = self.hash(secrets.token_urlsafe(16))
		return self._dummy_hash


class TokenIssuer:
	"""Signs and verifies time-limited HS256 access tokens."""

	def __init__(self, secret: str, algorithm: str = "HS256", expires_min: int = 60):
		self.secret = secret
		self.algorithm = algorithm
		self.expires_min = expires_min

	def sign(self, payload: dict, expires_delta: Optional[timedelta] = None) -> str:
		now = datetime.now(timezone.utc)
		delta = expires_delta if expires_delta is not None else timedelta(minutes=self.expires_min)
		claims = {
			**payload,
			"type": "access",
			"iat": int(now.timestamp()),
			"exp": int((now + delta).timestamp()),
		}
		return jwt.encode(claims, self.secret, algorithm=self.algorithm)

	def verify(self, token: str) -> dict:
		"""Decode ``token`` and return its claims.

		Raises ``jose.JWTError`` (``ExpiredSignatureError`` included) when the
		signature or expiry check fails.
		"""
		return jwt.decode(token, self.secret, algorithms=[self.algorithm])


password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
token_issuer = TokenIssuer(settings.JWT_SECRET, settings.JWT_ALG, settings.ACCESS_TOKEN_EXPIRES_MIN)


def validate_token(token: Optional[str], users, tokens: TokenIssuer):
	"""Resolve the user a bearer token was issued to.

	The user is looked up by both id and username, so tokens of deleted or
	renamed accounts stop working.
	"""
	if not token:
		raise UnauthorizedError("Missing bearer token")
	try:
		payload = tokens.verify(token)
	except JWTError:
		raise UnauthorizedError("Invalid or expired token")

	if payload.get("type") != "access":
		raise UnauthorizedError("Invalid token type")
	user_id = payload.get("id")
	username = payload.get("username")
	if not user_id or not username:
		raise UnauthorizedError("Invalid token")

	user = users.find_one(id=user_id, username=username)
	if not user:
		raise UnauthorizedError("User not found")
	return user
