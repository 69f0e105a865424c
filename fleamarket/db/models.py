import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Text, Enum
from sqlalchemy.orm import relationship
from fleamarket.db.base import Base


def _uuid() -> str:
	return str(uuid.uuid4())

def _utcnow() -> datetime:
	return datetime.now(timezone.utc).replace(tzinfo=None)


class UserTier(str, enum.Enum):
	FREE = "FREE"
	PREMIUM = "PREMIUM"

class ItemStatus(str, enum.Enum):
	ON_SALE = "ON_SALE"
	SOLD_OUT = "SOLD_OUT"


class User(Base):
	__tablename__ = "users"

	id = Column(String(36), primary_key=True, default=_uuid)
	username = Column(String, unique=True, index=True, nullable=False)
	password_hash = Column(String, nullable=False)
	tier = Column(Enum(UserTier), nullable=False, default=UserTier.FREE)
	created_at = Column(DateTime, default=_utcnow)

	items = relationship("Item", back_populates="user")

	def __repr__(self):
		return f"<User(id={self.id}, username={self.username}, tier={self.tier})>"

class Item(Base):
	__tablename__ = "items"

	id = Column(String(36), primary_key=True, default=_uuid)
	name = Column(String, nullable=False)
	price = Column(Integer, nullable=False)
	description = Column(Text, nullable=False)
	status = Column(Enum(ItemStatus), nullable=False, default=ItemStatus.ON_SALE)
	created_at = Column(DateTime, nullable=False, default=_utcnow)
	updated_at = Column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)
	user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)

	user = relationship("User", back_populates="items")

	def __repr__(self):
		return f"<Item(id={self.id}, name={self.name}, status={self.status})>"
