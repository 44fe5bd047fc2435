from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eticket.crud.base import EntityBaseRepository
from eticket.database.models.movies import Actor
from eticket.database.session import get_db


class ActorsService(EntityBaseRepository[Actor]):
    model = Actor


def get_actors_service(db: AsyncSession = Depends(get_db)) -> ActorsService:
    return ActorsService(db)
