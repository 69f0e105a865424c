import pytest

from fleamarket.core.errors import ConflictError
from fleamarket.db.models import ItemStatus, UserTier
from fleamarket.db.repositories import UserRepository, ItemRepository
from fleamarket.schemas.items import ItemCreate


class TestUserRepository:
	def test_create_defaults_to_free_tier(self, db):
		user = UserRepository(db).create_user("test1", "hash")

		assert user.id
		assert user.tier == UserTier.FREE

	def test_duplicate_username_conflicts(self, db):
		users = UserRepository(db)
		users.create_user("test1", "hash")

		with pytest.raises(ConflictError):
			users.create_user("test1", "other")
		# Session is still usable after the rollback
		assert users.find_one(username="test1").password_hash == "hash"

	def test_find_one_requires_every_filter_to_match(self, db):
		users = UserRepository(db)
		user = users.create_user("test1", "hash", UserTier.PREMIUM)

		assert users.find_one(id=user.id, username="test1") is user
		assert users.find_one(id=user.id, username="renamed") is None
		assert users.find_one(username="nobody") is None


class TestItemRepository:
	def test_lifecycle(self, db):
		owner = UserRepository(db).create_user("test1", "hash")
		items = ItemRepository(db)

		item = items.create_item(ItemCreate(name="PC", price=50000, description="test"), owner)
		assert item.user_id == owner.id
		assert item.status == ItemStatus.ON_SALE
		assert item.created_at is not None
		assert items.find() == [item]

		item.status = ItemStatus.SOLD_OUT
		items.save(item)
		db.expire_all()
		assert items.find_one(item.id).status == ItemStatus.SOLD_OUT

		item_id = item.id
		items.delete(item_id)
		assert items.find_one(item_id) is None
		assert items.find() == []

	def test_delete_drops_instance_from_session(self, db):
		owner = UserRepository(db).create_user("test1", "hash")
		items = ItemRepository(db)
		item = items.create_item(ItemCreate(name="PC", price=50000, description="test"), owner)
		item_id = item.id

		items.delete(item_id)

		assert item not in db
		assert items.find_one(item_id) is None

	def test_delete_unknown_id_is_a_no_op(self, db):
		ItemRepository(db).delete("missing")
