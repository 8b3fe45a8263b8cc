"""
Schemas for the inventory collections.

They share field rules with the catalog schemas; separate classes keep the
OpenAPI component names distinct.
"""
from __future__ import annotations

from .catalog import (
    BoxRead,
    BoxWrite,
    ItemRead,
    ItemWrite,
    StorageUnitRead,
    StorageUnitWrite,
)


class InventoryStorageUnitWrite(StorageUnitWrite):
    """Create/update payload for an inventory storage unit."""


class InventoryStorageUnitRead(StorageUnitRead):
    """Read model for an inventory storage unit."""


class InventoryBoxWrite(BoxWrite):
    """Create/update payload for an inventory box."""


class InventoryBoxRead(BoxRead):
    """Read model for an inventory box."""


class InventoryItemWrite(ItemWrite):
    """Create/update payload for an inventory item."""


class InventoryItemRead(ItemRead):
    """Read model for an inventory item."""
