import os
from dotenv import load_dotenv

from fleamarket.db.models import UserTier

load_dotenv()

def parse_tiers(value: str) -> list[UserTier]:
	"""Parse a comma list such as ``"free, premium"``; unknown names raise ``ValueError``."""
	tiers = []
	for part in value.split(","):
		name = part.strip().upper()
		if not name:
			continue
		if name not in UserTier.__members__:
			raise ValueError(f"Unknown account tier {part.strip()!r}; expected one of {', '.join(UserTier.__members__)}")
		tiers.append(UserTier[name])
	return tiers

class Settings:
	APP_NAME = os.getenv("APP_NAME", "Fleamarket API")
	DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./fleamarket.db")

	JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me")
	JWT_ALG = "HS256"

	# Access tokens live for one hour unless overridden
	ACCESS_TOKEN_EXPIRES_MIN = int(os.getenv("ACCESS_TOKEN_EXPIRES_MIN", "60"))

	BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

	LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

	# Tiers allowed to list new items; empty means everyone
	ITEM_CREATE_TIERS = parse_tiers(os.getenv("ITEM_CREATE_TIERS", ""))

settings = Settings()
