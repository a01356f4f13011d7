"""Wishlist API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sneakervault.api.dependencies import get_collection_service, get_current_user
from sneakervault.database import get_db
from sneakervault.models.user import User
from sneakervault.models.wishlist import WishlistItem
from sneakervault.schemas.auth import MessageResponse
from sneakervault.schemas.wishlist import WishlistItemCreate, WishlistItemResponse
from sneakervault.services.collection import CollectionService

router = APIRouter(prefix="/api/wishlist", tags=["wishlist"])

DUPLICATE_DETAIL = "This sneaker is already in your wishlist with this size"


@router.get("", response_model=list[WishlistItemResponse])
def list_wishlist(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    """Get the user's wishlist, newest first."""
    return service.list_wishlist(current_user.id)


@router.post("", response_model=WishlistItemResponse, status_code=status.HTTP_201_CREATED)
def add_to_wishlist(
    item_data: WishlistItemCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Add a sneaker in a given size to the wishlist."""
    existing = (
        db.query(WishlistItem)
        .filter(
            WishlistItem.user_id == current_user.id,
            WishlistItem.sneaker_id == item_data.sneaker_id,
            WishlistItem.size == item_data.size,
        )
        .first()
    )
    if existing:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_DETAIL)

    item = WishlistItem(user_id=current_user.id, **item_data.model_dump())
    db.add(item)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_DETAIL) from None
    db.refresh(item)
    return item


@router.delete("/{item_id}", response_model=MessageResponse)
def remove_from_wishlist(
    item_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    """Remove an item from the wishlist."""
    item = service.get_wishlist_item(current_user.id, item_id)
    service.db.delete(item)
    service.db.commit()
    return MessageResponse(message="Item removed from wishlist")
