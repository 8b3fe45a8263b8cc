from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from anything_api.db.base import AuditMixin, Base, IntPkMixin


class InventoryStorageUnit(IntPkMixin, AuditMixin, Base):
    """A place that holds boxes and loose items (shelf, cabinet, room)."""
    __tablename__ = "inventory_storage_units"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)


class InventoryBox(IntPkMixin, AuditMixin, Base):
    """Numbered box, optionally placed in a storage unit."""
    __tablename__ = "inventory_boxes"

    number: Mapped[int] = mapped_column(Integer, nullable=False)
    storage_unit_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("inventory_storage_units.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )


class InventoryItem(IntPkMixin, AuditMixin, Base):
    """Item kept in a box and/or a storage unit."""
    __tablename__ = "inventory_items"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    box_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("inventory_boxes.id", ondelete="SET NULL"), nullable=True, index=True
    )
    storage_unit_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("inventory_storage_units.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
