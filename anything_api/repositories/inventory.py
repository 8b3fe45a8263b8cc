from __future__ import annotations

from typing import List

from sqlalchemy import exists, select

from anything_api.db.base import utcnow
from anything_api.db.models.inventory import InventoryBox, InventoryItem, InventoryStorageUnit
from .base import SoftDeleteRepository


class InventoryStorageUnitRepository(SoftDeleteRepository[InventoryStorageUnit]):
    """Repository for inventory storage units."""
    model = InventoryStorageUnit

    async def has_active_contents(self, storage_unit_id: int) -> bool:
        """True when a live box or a live item still points at the storage unit."""
        boxes = exists().where(
            InventoryBox.storage_unit_id == storage_unit_id,
            InventoryBox.deleted_on.is_(None),
        )
        items = exists().where(
            InventoryItem.storage_unit_id == storage_unit_id,
            InventoryItem.deleted_on.is_(None),
        )
        result = await self.execute(select(boxes | items))
        return bool(result.scalar())


class InventoryBoxRepository(SoftDeleteRepository[InventoryBox]):
    """Repository for inventory boxes."""
    model = InventoryBox


class InventoryItemRepository(SoftDeleteRepository[InventoryItem]):
    """Repository for inventory items."""
    model = InventoryItem

    async def list_active_in_box(self, box_id: int) -> List[InventoryItem]:
        stmt = self._active().where(InventoryItem.box_id == box_id)
        result = await self.scalars(stmt)
        return list(result)

    async def detach_from_box(self, box_id: int) -> int:
        """Clear box_id on every live item in the box; the caller commits."""
        items = await self.list_active_in_box(box_id)
        now = utcnow()
        for item in items:
            item.box_id = None
            item.modified_on = now
        return len(items)
