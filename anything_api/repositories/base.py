from __future__ import annotations

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import Executable, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from anything_api.db.base import AuditMixin, Base, utcnow

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository:
    """
    Base class for repositories providing common helpers around an AsyncSession.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def execute(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute a SQLAlchemy statement."""
        return await self.session.execute(statement, params or {})

    async def scalars(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return scalars."""
        result = await self.execute(statement, params)
        return result.scalars()

    async def scalar_one_or_none(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return a single scalar or None."""
        result = await self.execute(statement, params)
        return result.scalar_one_or_none()

    async def commit(self) -> None:
        """Commit current transaction."""
        await self.session.commit()

    async def add(self, entity: Any) -> None:
        """Add a single entity to session."""
        self.session.add(entity)


class SoftDeleteRepository(BaseRepository, Generic[ModelT]):
    """
    Repository for models carrying the AuditMixin columns.

    Rows with deleted_on set are treated as absent by every read helper.
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession, model: Optional[Type[ModelT]] = None) -> None:
        super().__init__(session)
        if model is not None:
            self.model = model
        if not issubclass(self.model, AuditMixin):
            raise TypeError(f"{self.model.__name__} does not support soft deletes")

    def _active(self):
        return select(self.model).where(self.model.deleted_on.is_(None))

    async def list_active(self) -> List[ModelT]:
        stmt = self._active().order_by(self.model.id)
        result = await self.scalars(stmt)
        return list(result)

    async def get_active(self, row_id: int) -> Optional[ModelT]:
        stmt = self._active().where(self.model.id == row_id)
        return await self.scalar_one_or_none(stmt)

    async def exists_active(self, row_id: int) -> bool:
        stmt = select(exists().where(self.model.id == row_id, self.model.deleted_on.is_(None)))
        result = await self.execute(stmt)
        return bool(result.scalar())

    async def create(self, **values: Any) -> ModelT:
        row = self.model(**values)
        await self.add(row)
        await self.commit()
        await self.session.refresh(row)
        return row

    async def update(self, row: ModelT, **values: Any) -> ModelT:
        for key, value in values.items():
            setattr(row, key, value)
        row.modified_on = utcnow()
        await self.commit()
        return row

    async def soft_delete(self, row: ModelT, *, commit: bool = True) -> None:
        row.deleted_on = utcnow()
        if commit:
            await self.commit()
