from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from eticket.crud.cinemas import CinemasService, get_cinemas_service
from eticket.database.models.movies import Cinema
from eticket.deps import get_current_admin
from eticket.schemas.cinemas import CinemaSchema, CinemaCreateSchema, CinemaUpdateSchema
from eticket.schemas.common import MessageSchema

router = APIRouter(prefix="/cinemas", tags=["cinemas"])


@router.get("/", response_model=List[CinemaSchema])
async def list_cinemas(service: CinemasService = Depends(get_cinemas_service)):
    """
    **List all cinemas.**
    """
    return await service.get_all()


@router.get("/{cinema_id}", response_model=CinemaSchema)
async def get_cinema(cinema_id: int, service: CinemasService = Depends(get_cinemas_service)):
    """
    **Retrieve a cinema by ID.**

    - **Raises:**
      - `HTTPException` 404: If the cinema does not exist.
    """
    cinema = await service.get_by_id(cinema_id)
    if not cinema:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cinema not found.")
    return cinema


@router.post("/", response_model=CinemaSchema, status_code=status.HTTP_201_CREATED)
async def create_cinema(
        payload: CinemaCreateSchema,
        service: CinemasService = Depends(get_cinemas_service),
        admin=Depends(get_current_admin),
):
    """
    **Admin-only: create a cinema.**
    """
    return await service.add(Cinema(**payload.model_dump()))


@router.put("/{cinema_id}", response_model=CinemaSchema)
async def edit_cinema(
        cinema_id: int,
        payload: CinemaUpdateSchema,
        service: CinemasService = Depends(get_cinemas_service),
        admin=Depends(get_current_admin),
):
    """
    **Admin-only: replace a cinema's details.**

    - **Raises:**
      - `HTTPException` 404: If the body ID differs from the path ID or the cinema does not exist.
    """
    if payload.id != cinema_id or not await service.update(cinema_id, Cinema(**payload.model_dump())):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cinema not found.")
    return await service.get_by_id(cinema_id)


@router.delete("/{cinema_id}", response_model=MessageSchema)
async def delete_cinema(
        cinema_id: int,
        service: CinemasService = Depends(get_cinemas_service),
        admin=Depends(get_current_admin),
):
    """
    **Admin-only: delete a cinema.**

    Movies screened by the cinema are not touched; removing or moving them
    first is up to the caller.

    - **Raises:**
      - `HTTPException` 404: If the cinema does not exist.
    """
    if not await service.delete(cinema_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cinema not found.")
    return {"message": "Cinema deleted."}
