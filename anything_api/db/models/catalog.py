from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from anything_api.db.base import AuditMixin, Base, IntPkMixin


class Something(IntPkMixin, AuditMixin, Base):
    """Generic named record."""
    __tablename__ = "somethings"

    name: Mapped[str] = mapped_column(String(200), nullable=False)


class StorageUnit(IntPkMixin, AuditMixin, Base):
    """Storage unit outside the inventory module."""
    __tablename__ = "storage_units"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)


class Box(IntPkMixin, AuditMixin, Base):
    __tablename__ = "boxes"

    number: Mapped[int] = mapped_column(Integer, nullable=False)
    storage_unit_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("storage_units.id", ondelete="CASCADE"), nullable=True, index=True
    )


class Item(IntPkMixin, AuditMixin, Base):
    __tablename__ = "items"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    box_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("boxes.id", ondelete="SET NULL"), nullable=True, index=True
    )
    storage_unit_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("storage_units.id", ondelete="CASCADE"), nullable=True, index=True
    )
