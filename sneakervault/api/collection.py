"""Collection API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sneakervault.api.dependencies import get_collection_service, get_current_user
from sneakervault.database import get_db
from sneakervault.models.collection import CollectionItem
from sneakervault.models.user import User
from sneakervault.schemas.auth import MessageResponse
from sneakervault.schemas.collection import (
    CollectionItemCreate,
    CollectionItemResponse,
    CollectionItemUpdate,
    CollectionStatistics,
)
from sneakervault.services.collection import CollectionService

router = APIRouter(prefix="/api/collection", tags=["collection"])


@router.get("", response_model=list[CollectionItemResponse])
def list_collection(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    """Get the user's collection, newest first."""
    return service.list_items(current_user.id)


@router.post("", response_model=CollectionItemResponse, status_code=status.HTTP_201_CREATED)
def add_to_collection(
    item_data: CollectionItemCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Add a pair to the collection."""
    item = CollectionItem(user_id=current_user.id, labels=[], **item_data.model_dump())
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


@router.get("/statistics", response_model=CollectionStatistics)
def collection_statistics(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    """Get aggregate numbers for the user's collection."""
    return service.statistics(current_user.id)


@router.get("/{item_id}", response_model=CollectionItemResponse)
def get_collection_item(
    item_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    """Get a specific collection item."""
    return service.get_item(current_user.id, item_id)


@router.put("/{item_id}", response_model=CollectionItemResponse)
def update_collection_item(
    item_id: str,
    item_data: CollectionItemUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    """Update a collection item, labels included."""
    item = service.get_item(current_user.id, item_id)

    for field, value in item_data.model_dump().items():
        setattr(item, field, value)

    service.db.commit()
    service.db.refresh(item)
    return item


@router.delete("/{item_id}", response_model=MessageResponse)
def delete_collection_item(
    item_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    """Remove a pair from the collection."""
    item = service.get_item(current_user.id, item_id)
    service.db.delete(item)
    service.db.commit()
    return MessageResponse(message="Removed from collection successfully")
