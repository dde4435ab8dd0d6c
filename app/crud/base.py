from typing import Any, Generic, Sequence, Type, TypeVar
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select, select

from app.core.exceptions import NotFoundError
from app.models import utcnow

ModelT = TypeVar("ModelT")


class CRUDBase(Generic[ModelT]):
    """
    Repository over one soft-deletable model.

    Every read goes through `_select()`, which hides tombstoned rows.
    Subclasses extend it to eager load relations and name their not-found error.
    """
    model: Type[ModelT]
    not_found_error: Type[NotFoundError] = NotFoundError

    def _select(self) -> Select:
        return (select(self.model)
                .where(self.model.deleted_at.is_(None))
                .execution_options(populate_existing=True))

    async def all(self, db: AsyncSession) -> Sequence[ModelT]:
        result = await db.execute(self._select().order_by(self.model.id))
        return result.scalars().all()

    async def find(self, db: AsyncSession, id: int) -> ModelT:
        result = await db.execute(self._select().where(self.model.id == id))
        instance = result.scalar_one_or_none()
        if instance is None:
            raise self.not_found_error()
        return instance

    async def create(self, db: AsyncSession, data: dict[str, Any]) -> ModelT:
        instance = self.model(**data)
        db.add(instance)
        await db.commit()
        return await self.find(db, instance.id)

    async def update(self, db: AsyncSession, id: int, data: dict[str, Any]) -> ModelT:
        instance = await self.find(db, id)
        for field, value in data.items():
            setattr(instance, field, value)
        await db.commit()
        return await self.find(db, id)

    async def delete(self, db: AsyncSession, id: int) -> bool:
        instance = await self.find(db, id)
        instance.deleted_at = utcnow()
        await db.commit()
        return instance.deleted_at is not None
