from datetime import datetime

from pydantic import BaseModel, Field

from fleamarket.db.models import ItemStatus

class ItemCreate(BaseModel):
	name: str = Field(min_length=1, max_length=40)
	price: int = Field(ge=1)
	description: str = Field(min_length=1)

class ItemOut(BaseModel):
	id: str
	name: str
	price: int
	description: str
	status: ItemStatus
	created_at: datetime
	updated_at: datetime
	user_id: str

	class Config:
		from_attributes = True
