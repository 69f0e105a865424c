from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response

from fleamarket.core.logging import log_event
from fleamarket.db.models import User
from fleamarket.dependencies import get_current_user, get_item_service, item_creator
from fleamarket.schemas.items import ItemCreate, ItemOut
from fleamarket.services import ItemService

router = APIRouter(prefix="/items", tags=["items"])

@router.get("", response_model=list[ItemOut])
def list_items(items: ItemService = Depends(get_item_service)):
	return items.find_all()

@router.get("/{item_id}", response_model=ItemOut)
def get_item(item_id: UUID, items: ItemService = Depends(get_item_service)):
	return items.find_by_id(str(item_id))

@router.post("", response_model=ItemOut, status_code=201)
def create_item(
	request: Request,
	payload: ItemCreate,
	items: ItemService = Depends(get_item_service),
	user: User = Depends(item_creator),
):
	item = items.create(payload, user)
	log_event("item_created", item_id=item.id, owner=user.username, request_id=request.state.request_id)
	return item

@router.patch("/{item_id}", response_model=ItemOut)
def update_status(
	request: Request,
	item_id: UUID,
	items: ItemService = Depends(get_item_service),
	user: User = Depends(get_current_user),
):
	items.update_status(str(item_id), user)
	log_event("item_purchased", item_id=str(item_id), buyer=user.username, request_id=request.state.request_id)
	return items.find_by_id(str(item_id))

@router.delete("/{item_id}", status_code=204)
def delete_item(
	request: Request,
	item_id: UUID,
	items: ItemService = Depends(get_item_service),
	user: User = Depends(get_current_user),
):
	items.delete(str(item_id), user)
	log_event("item_deleted", item_id=str(item_id), actor=user.username, request_id=request.state.request_id)
	return Response(status_code=204)
