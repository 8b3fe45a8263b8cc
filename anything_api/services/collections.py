"""
Services for the soft-deleted resource collections.

CollectionService implements the create/read/update/soft-delete contract
shared by every collection. Subclasses add reference checks and delete rules.
"""
from __future__ import annotations

import logging
from typing import Any, ClassVar, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from anything_api.core.errors import ConflictError, InvalidReferenceError, NotFoundError
from anything_api.repositories.base import SoftDeleteRepository
from anything_api.repositories.catalog import (
    BoxRepository,
    ItemRepository,
    SomethingRepository,
    StorageUnitRepository,
)
from anything_api.repositories.inventory import (
    InventoryBoxRepository,
    InventoryItemRepository,
    InventoryStorageUnitRepository,
)
from anything_api.services.base import BaseService

logger = logging.getLogger(__name__)

RepoT = TypeVar("RepoT", bound=SoftDeleteRepository)

INVALID_STORAGE_UNIT = "Invalid storage unit ID."
INVALID_BOX = "Invalid box ID."
STORAGE_UNIT_IN_USE = "Cannot delete storage unit while active boxes or items are associated with it."


class CollectionService(BaseService, Generic[RepoT]):
    """Create/read/update/soft-delete for one collection."""

    repository_class: ClassVar[Type[SoftDeleteRepository]]
    label: ClassVar[str] = "Record"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo: RepoT = self.repository_class(session)

    async def list_active(self) -> List[Any]:
        return await self.repo.list_active()

    async def get(self, row_id: int):
        row = await self.repo.get_active(row_id)
        if row is None:
            raise NotFoundError(f"{self.label} {row_id} not found")
        return row

    async def create(self, payload: BaseModel):
        values = payload.model_dump()
        await self._check_references(values)
        row = await self.repo.create(**values)
        logger.info("Created %s %s", self.label, row.id)
        return row

    async def update(self, row_id: int, payload: BaseModel):
        row = await self.get(row_id)
        values = payload.model_dump()
        await self._check_references(values)
        return await self.repo.update(row, **values)

    async def delete(self, row_id: int) -> None:
        row = await self.get(row_id)
        await self._before_delete(row)
        await self.repo.soft_delete(row)
        logger.info("Soft-deleted %s %s", self.label, row_id)

    async def _check_references(self, values: Dict[str, Any]) -> None:
        """Validate foreign keys in the payload; no-op for collections without any."""

    async def _before_delete(self, row: Any) -> None:
        """Hook run inside the delete transaction before deleted_on is set."""


async def _require_live(repo: SoftDeleteRepository, row_id: Optional[int], message: str) -> None:
    if row_id is not None and not await repo.exists_active(row_id):
        raise InvalidReferenceError(message)


class SomethingService(CollectionService[SomethingRepository]):
    repository_class = SomethingRepository
    label = "Something"


class StorageUnitService(CollectionService[StorageUnitRepository]):
    repository_class = StorageUnitRepository
    label = "Storage unit"


class BoxService(CollectionService[BoxRepository]):
    repository_class = BoxRepository
    label = "Box"

    async def _check_references(self, values: Dict[str, Any]) -> None:
        await _require_live(StorageUnitRepository(self.session), values.get("storage_unit_id"), INVALID_STORAGE_UNIT)


class ItemService(CollectionService[ItemRepository]):
    repository_class = ItemRepository
    label = "Item"

    async def _check_references(self, values: Dict[str, Any]) -> None:
        await _require_live(BoxRepository(self.session), values.get("box_id"), INVALID_BOX)
        await _require_live(StorageUnitRepository(self.session), values.get("storage_unit_id"), INVALID_STORAGE_UNIT)


class InventoryStorageUnitService(CollectionService[InventoryStorageUnitRepository]):
    repository_class = InventoryStorageUnitRepository
    label = "Inventory storage unit"

    async def _before_delete(self, row: Any) -> None:
        if await self.repo.has_active_contents(row.id):
            raise ConflictError(STORAGE_UNIT_IN_USE)


class InventoryBoxService(CollectionService[InventoryBoxRepository]):
    repository_class = InventoryBoxRepository
    label = "Inventory box"

    async def _check_references(self, values: Dict[str, Any]) -> None:
        await _require_live(
            InventoryStorageUnitRepository(self.session), values.get("storage_unit_id"), INVALID_STORAGE_UNIT
        )

    async def _before_delete(self, row: Any) -> None:
        detached = await InventoryItemRepository(self.session).detach_from_box(row.id)
        if detached:
            logger.info("Detached %d item(s) from inventory box %s", detached, row.id)


class InventoryItemService(CollectionService[InventoryItemRepository]):
    repository_class = InventoryItemRepository
    label = "Inventory item"

    async def _check_references(self, values: Dict[str, Any]) -> None:
        await _require_live(InventoryBoxRepository(self.session), values.get("box_id"), INVALID_BOX)
        await _require_live(
            InventoryStorageUnitRepository(self.session), values.get("storage_unit_id"), INVALID_STORAGE_UNIT
        )
