from __future__ import annotations

from anything_api.db.models.catalog import Box, Item, Something, StorageUnit
from .base import SoftDeleteRepository


class SomethingRepository(SoftDeleteRepository[Something]):
    """Repository for Somethings."""
    model = Something


class StorageUnitRepository(SoftDeleteRepository[StorageUnit]):
    """Repository for storage units."""
    model = StorageUnit


class BoxRepository(SoftDeleteRepository[Box]):
    """Repository for boxes."""
    model = Box


class ItemRepository(SoftDeleteRepository[Item]):
    """Repository for items."""
    model = Item
