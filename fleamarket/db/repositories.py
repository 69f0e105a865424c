from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fleamarket.core.errors import ConflictError
from fleamarket.db.models import User, Item, UserTier


class UserRepository:
	def __init__(self, db: Session):
		self.db = db

	def find_one(self, **filters) -> Optional[User]:
		"""Return the first user matching every given column, e.g. ``username=`` or ``id=, username=``."""
		return self.db.query(User).filter_by(**filters).first()

	def create_user(self, username: str, password_hash: str, tier: Optional[UserTier] = None) -> User:
		user = User(
			username=username,
			password_hash=password_hash,
			tier=tier or UserTier.FREE,
		)
		self.db.add(user)
		try:
			self.db.commit()
		except IntegrityError:
			self.db.rollback()
			raise ConflictError("Username already exists")
		self.db.refresh(user)
		return user


class ItemRepository:
	def __init__(self, db: Session):
		self.db = db

	def find(self) -> list[Item]:
		return self.db.query(Item).order_by(Item.created_at.asc()).all()

	def find_one(self, item_id: str) -> Optional[Item]:
		return self.db.query(Item).filter(Item.id == item_id).first()

	def create_item(self, payload, owner: User) -> Item:
		item = Item(
			name=payload.name,
			price=payload.price,
			description=payload.description,
			user_id=owner.id,
		)
		self.db.add(item)
		self.db.commit()
		self.db.refresh(item)
		return item

	def save(self, item: Item) -> None:
		self.db.add(item)
		self.db.commit()
		self.db.refresh(item)

	def delete(self, item_id: str) -> None:
		item = self.find_one(item_id)
		if item is None:
			return
		self.db.delete(item)
		self.db.commit()
