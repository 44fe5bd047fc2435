import logging
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from eticket.database.models.base import EntityBase
from eticket.exceptions import EntityIdMismatchError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=EntityBase)


def eager_load(relations: Sequence[Any]) -> list:
    """
    Build ``selectinload`` options for the given relations.

    Each relation is either a relationship attribute (``Movie.cinema``) or a
    tuple describing a path (``(Movie.actors_movies, ActorMovie.actor)``).
    """
    options = []
    for relation in relations:
        path = relation if isinstance(relation, tuple) else (relation,)
        loader = selectinload(path[0])
        for attribute in path[1:]:
            loader = loader.selectinload(attribute)
        options.append(loader)
    return options


class EntityBaseRepository(Generic[ModelType]):
    """
    CRUD access to one entity table through the request's session.

    Every write commits its own unit of work. Lookups of a missing id return
    ``None`` or ``False`` instead of raising.
    """

    model: type[ModelType]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self, *relations) -> list[ModelType]:
        stmt = select(self.model).options(*eager_load(relations))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, entity_id: int, *relations) -> ModelType | None:
        stmt = (
            select(self.model)
            .options(*eager_load(relations))
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def add(self, entity: ModelType) -> ModelType:
        self.db.add(entity)
        await self._commit()
        await self.db.refresh(entity)
        logger.info("Created %s id=%s", self.model.__name__, entity.id)
        return entity

    async def update(self, entity_id: int, entity: ModelType) -> bool:
        if entity.id is not None and entity.id != entity_id:
            raise EntityIdMismatchError(entity_id, entity.id)

        stored = await self.db.get(self.model, entity_id)
        if stored is None:
            return False

        for column in inspect(self.model).column_attrs:
            if column.key == "id":
                continue
            setattr(stored, column.key, getattr(entity, column.key))
        await self._commit()
        logger.info("Updated %s id=%s", self.model.__name__, entity_id)
        return True

    async def delete(self, entity_id: int) -> bool:
        entity = await self.db.get(self.model, entity_id)
        if entity is None:
            return False
        await self.db.delete(entity)
        await self._commit()
        logger.info("Deleted %s id=%s", self.model.__name__, entity_id)
        return True

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
