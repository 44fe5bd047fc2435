from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eticket.crud.base import EntityBaseRepository
from eticket.database.models.movies import Cinema
from eticket.database.session import get_db


class CinemasService(EntityBaseRepository[Cinema]):
    model = Cinema


def get_cinemas_service(db: AsyncSession = Depends(get_db)) -> CinemasService:
    return CinemasService(db)
