from fleamarket.core.errors import BadRequestError, NotFoundError
from fleamarket.db.models import Item, ItemStatus, User
from fleamarket.db.repositories import ItemRepository
from fleamarket.schemas.items import ItemCreate

class ItemService:
	def __init__(self, items: ItemRepository):
		self.items = items

	def find_all(self) -> list[Item]:
		return self.items.find()

	def find_by_id(self, item_id: str) -> Item:
		item = self.items.find_one(item_id)
		if item is None:
			raise NotFoundError("Item not found")
		return item

	def create(self, payload: ItemCreate, user: User) -> Item:
		return self.items.create_item(payload, user)

	def update_status(self, item_id: str, user: User) -> None:
		item = self.find_by_id(item_id)
		if item.user_id == user.id:
			raise BadRequestError("You cannot purchase your own item")
		if item.status == ItemStatus.SOLD_OUT:
			raise BadRequestError("Item is already sold out")

		item.status = ItemStatus.SOLD_OUT
		self.items.save(item)

	def delete(self, item_id: str, user: User) -> None:
		item = self.find_by_id(item_id)
		if item.user_id != user.id:
			raise BadRequestError("You cannot delete another user's item")
		self.items.delete(item_id)
