from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from eticket.crud.producers import ProducersService, get_producers_service
from eticket.database.models.movies import Producer
from eticket.deps import get_current_admin
from eticket.schemas.common import MessageSchema
from eticket.schemas.producers import ProducerSchema, ProducerCreateSchema, ProducerUpdateSchema

router = APIRouter(prefix="/producers", tags=["producers"])


@router.get("/", response_model=List[ProducerSchema])
async def list_producers(service: ProducersService = Depends(get_producers_service)):
    return await service.get_all()


@router.get("/{producer_id}", response_model=ProducerSchema)
async def get_producer(producer_id: int, service: ProducersService = Depends(get_producers_service)):
    """
    **Retrieve a producer by ID.**

    - **Raises:**
      - `HTTPException` 404: If the producer does not exist.
    """
    producer = await service.get_by_id(producer_id)
    if not producer:
        raise HTTPException(status_code=404, detail="Producer not found.")
    return producer


@router.post("/", response_model=ProducerSchema, status_code=status.HTTP_201_CREATED)
async def create_producer(
        payload: ProducerCreateSchema,
        service: ProducersService = Depends(get_producers_service),
        admin=Depends(get_current_admin),
):
    return await service.add(Producer(**payload.model_dump()))


@router.put("/{producer_id}", response_model=ProducerSchema)
async def edit_producer(
        producer_id: int,
        payload: ProducerUpdateSchema,
        service: ProducersService = Depends(get_producers_service),
        admin=Depends(get_current_admin),
):
    """
    **Admin-only: replace a producer's details.**

    - **Raises:**
      - `HTTPException` 404: If the body ID differs from the path ID or the producer does not exist.
    """
    if payload.id != producer_id:
        raise HTTPException(status_code=404, detail="Producer not found.")
    if not await service.update(producer_id, Producer(**payload.model_dump())):
        raise HTTPException(status_code=404, detail="Producer not found.")
    return await service.get_by_id(producer_id)


@router.delete("/{producer_id}", response_model=MessageSchema)
async def delete_producer(
        producer_id: int,
        service: ProducersService = Depends(get_producers_service),
        admin=Depends(get_current_admin),
):
    """
    **Admin-only: delete a producer.**

    - **Raises:**
      - `HTTPException` 404: If the producer does not exist.
    """
    if not await service.delete(producer_id):
        raise HTTPException(status_code=404, detail="Producer not found.")
    return {"message": "Producer deleted."}
