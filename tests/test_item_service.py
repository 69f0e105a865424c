from unittest.mock import Mock

import pytest

from fleamarket.core.errors import BadRequestError, NotFoundError
from fleamarket.db.models import Item, ItemStatus, User, UserTier
from fleamarket.schemas.items import ItemCreate
from fleamarket.services.item_service import ItemService


@pytest.fixture
def items():
	return Mock()


@pytest.fixture
def service(items):
	return ItemService(items)


@pytest.fixture
def buyer():
	return User(id="1", username="test1", password_hash="x", tier=UserTier.PREMIUM)


@pytest.fixture
def seller():
	return User(id="2", username="test2", password_hash="x", tier=UserTier.FREE)


@pytest.fixture
def item():
	return Item(
		id="test-id",
		name="PC",
		price=50000,
		description="",
		status=ItemStatus.ON_SALE,
		user_id="2",
	)


class TestFind:
	def test_find_all(self, service, items):
		items.find.return_value = []
		assert service.find_all() == []

	def test_find_by_id(self, service, items, item):
		items.find_one.return_value = item
		assert service.find_by_id("test-id") is item
		items.find_one.assert_called_once_with("test-id")

	def test_find_by_id_missing(self, service, items):
		items.find_one.return_value = None
		with pytest.raises(NotFoundError):
			service.find_by_id("missing")


class TestCreate:
	def test_creator_becomes_owner(self, service, items, seller, item):
		payload = ItemCreate(name="PC", price=50000, description="test")
		items.create_item.return_value = item

		result = service.create(payload, seller)

		items.create_item.assert_called_once_with(payload, seller)
		assert result.user_id == seller.id
		assert result.status == ItemStatus.ON_SALE


class TestUpdateStatus:
	def test_other_user_buys(self, service, items, item, buyer):
		items.find_one.return_value = item

		service.update_status("test-id", buyer)

		assert item.status == ItemStatus.SOLD_OUT
		items.save.assert_called_once_with(item)

	def test_owner_cannot_buy(self, service, items, item, seller):
		items.find_one.return_value = item

		with pytest.raises(BadRequestError):
			service.update_status("test-id", seller)
		assert item.status == ItemStatus.ON_SALE
		items.save.assert_not_called()

	def test_sold_out_item_cannot_be_bought_again(self, service, items, item, buyer):
		item.status = ItemStatus.SOLD_OUT
		items.find_one.return_value = item

		with pytest.raises(BadRequestError, match="sold out"):
			service.update_status("test-id", buyer)
		items.save.assert_not_called()

	def test_missing_item(self, service, items, buyer):
		items.find_one.return_value = None
		with pytest.raises(NotFoundError):
			service.update_status("missing", buyer)


class TestDelete:
	def test_owner_deletes(self, service, items, item, seller):
		items.find_one.return_value = item

		service.delete("test-id", seller)

		items.delete.assert_called_once_with("test-id")

	def test_other_user_cannot_delete(self, service, items, item, buyer):
		items.find_one.return_value = item

		with pytest.raises(BadRequestError):
			service.delete("test-id", buyer)
		items.delete.assert_not_called()

	def test_missing_item(self, service, items, seller):
		items.find_one.return_value = None
		with pytest.raises(NotFoundError):
			service.delete("missing", seller)
		items.delete.assert_not_called()
