"""
Routers for the plain resource collections: somethings, storage units,
boxes and items.
"""
from __future__ import annotations

from anything_api.api.routes._crud import build_collection_router
from anything_api.schemas.catalog import (
    BoxRead,
    BoxWrite,
    ItemRead,
    ItemWrite,
    SomethingRead,
    SomethingWrite,
    StorageUnitRead,
    StorageUnitWrite,
)
from anything_api.services.collections import (
    BoxService,
    ItemService,
    SomethingService,
    StorageUnitService,
)

somethings_router = build_collection_router(
    prefix="/api/somethings",
    tag="Somethings",
    service_class=SomethingService,
    write_schema=SomethingWrite,
    read_schema=SomethingRead,
    noun="something",
)

storage_units_router = build_collection_router(
    prefix="/api/storageunits",
    tag="Storage Units",
    service_class=StorageUnitService,
    write_schema=StorageUnitWrite,
    read_schema=StorageUnitRead,
    noun="storage unit",
)

boxes_router = build_collection_router(
    prefix="/api/boxes",
    tag="Boxes",
    service_class=BoxService,
    write_schema=BoxWrite,
    read_schema=BoxRead,
    noun="box",
)

items_router = build_collection_router(
    prefix="/api/items",
    tag="Items",
    service_class=ItemService,
    write_schema=ItemWrite,
    read_schema=ItemRead,
    noun="item",
)
