from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eticket.crud.base import EntityBaseRepository
from eticket.database.models.movies import Producer
from eticket.database.session import get_db


class ProducersService(EntityBaseRepository[Producer]):
    model = Producer


def get_producers_service(db: AsyncSession = Depends(get_db)) -> ProducersService:
    return ProducersService(db)
