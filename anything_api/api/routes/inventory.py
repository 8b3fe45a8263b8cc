"""
Routers for the inventory collections.

Beyond the shared CRUD contract these enforce live references on create and
update, refuse to delete a storage unit that still holds live boxes or items
(409), and detach items from a box when the box is deleted.
"""
from __future__ import annotations

from anything_api.api.routes._crud import build_collection_router
from anything_api.schemas.inventory import (
    InventoryBoxRead,
    InventoryBoxWrite,
    InventoryItemRead,
    InventoryItemWrite,
    InventoryStorageUnitRead,
    InventoryStorageUnitWrite,
)
from anything_api.services.collections import (
    InventoryBoxService,
    InventoryItemService,
    InventoryStorageUnitService,
)

storage_units_router = build_collection_router(
    prefix="/api/inventory-storage-units",
    tag="Inventory",
    service_class=InventoryStorageUnitService,
    write_schema=InventoryStorageUnitWrite,
    read_schema=InventoryStorageUnitRead,
    noun="inventory storage unit",
)

boxes_router = build_collection_router(
    prefix="/api/inventory-boxes",
    tag="Inventory",
    service_class=InventoryBoxService,
    write_schema=InventoryBoxWrite,
    read_schema=InventoryBoxRead,
    noun="inventory box",
)

items_router = build_collection_router(
    prefix="/api/inventory-items",
    tag="Inventory",
    service_class=InventoryItemService,
    write_schema=InventoryItemWrite,
    read_schema=InventoryItemRead,
    noun="inventory item",
)
