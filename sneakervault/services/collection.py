"""Collection and wishlist queries plus profile statistics."""

from collections import Counter
from typing import Any

from sqlalchemy.orm import Session

from sneakervault.exceptions import NotFoundError
from sneakervault.models.collection import CollectionItem
from sneakervault.models.wishlist import WishlistItem


class CollectionService:
    """Owner-scoped access to a user's sneakers."""

    def __init__(self, db: Session):
        self.db = db

    def list_items(self, user_id: str) -> list[CollectionItem]:
        return (
            self.db.query(CollectionItem)
            .filter(CollectionItem.user_id == user_id)
            .order_by(CollectionItem.created_at.desc())
            .all()
        )

    def get_item(self, user_id: str, item_id: str) -> CollectionItem:
        """Get a collection item, treating other users' items as missing."""
        item = (
            self.db.query(CollectionItem)
            .filter(CollectionItem.id == item_id, CollectionItem.user_id == user_id)
            .first()
        )
        if item is None:
            raise NotFoundError("Collection item not found")
        return item

    def list_wishlist(self, user_id: str) -> list[WishlistItem]:
        return (
            self.db.query(WishlistItem)
            .filter(WishlistItem.user_id == user_id)
            .order_by(WishlistItem.created_at.desc())
            .all()
        )

    def get_wishlist_item(self, user_id: str, item_id: str) -> WishlistItem:
        item = (
            self.db.query(WishlistItem)
            .filter(WishlistItem.id == item_id, WishlistItem.user_id == user_id)
            .first()
        )
        if item is None:
            raise NotFoundError("Wishlist item not found")
        return item

    def statistics(self, user_id: str) -> dict[str, Any]:
        """Aggregate the collection for the statistics page.

        Returns:
            {
                "total_items": int,
                "total_value": float,        # sum of purchase prices
                "total_retail_value": float,
                "brands": {brand: count},    # most common first
                "conditions": {condition: count},
                "labels": {label: count},
            }
        """
        items = self.list_items(user_id)
        label_counts: Counter[str] = Counter()
        for item in items:
            label_counts.update(item.labels or [])

        return {
            "total_items": len(items),
            "total_value": total_value(items),
            "total_retail_value": round(sum(item.retail_price or 0 for item in items), 2),
            "brands": dict(Counter(item.brand for item in items).most_common()),
            "conditions": dict(Counter(item.condition for item in items).most_common()),
            "labels": dict(label_counts.most_common()),
        }


def total_value(items: list[CollectionItem]) -> float:
    """What the user paid for the collection. Items without a price count as 0."""
    return round(sum(item.purchase_price or 0 for item in items), 2)
