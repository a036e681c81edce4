from typing import Any, Generic, Sequence, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class SqlAlchemyRepository(Generic[ModelType]):
    def __init__(self, session: AsyncSession, model: Type[ModelType]):
        self.session = session
        self.model = model

    async def add_item(self, item: ModelType) -> ModelType:
        self.session.add(item)
        await self.session.commit()
        await self.session.refresh(item)
        return item

    async def get_all_items(self, *order_by: Any) -> Sequence[ModelType]:
        query = select(self.model)
        if order_by:
            query = query.order_by(*order_by)
        result = await self.session.execute(query)
        return result.scalars().all()

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()
