from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from eticket.crud.actors import ActorsService, get_actors_service
from eticket.database.models.movies import Actor
from eticket.deps import get_current_admin
from eticket.schemas.actors import ActorSchema, ActorCreateSchema, ActorUpdateSchema
from eticket.schemas.common import MessageSchema

router = APIRouter(prefix="/actors", tags=["actors"])

NOT_FOUND_DETAIL = "Actor not found."


@router.get("/", response_model=List[ActorSchema])
async def list_actors(service: ActorsService = Depends(get_actors_service)):
    """
    **List all actors.**

    Anonymous access. Returns every actor in storage order.
    """
    return await service.get_all()


@router.get("/{actor_id}", response_model=ActorSchema)
async def get_actor(actor_id: int, service: ActorsService = Depends(get_actors_service)):
    """
    **Retrieve an actor by ID.**

    Also serves as the confirmation view before an edit or a delete.

    - **Raises:**
      - `HTTPException` 404: If the actor does not exist.
    """
    actor = await service.get_by_id(actor_id)
    if not actor:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
    return actor


@router.post("/", response_model=ActorSchema, status_code=status.HTTP_201_CREATED)
async def create_actor(
        payload: ActorCreateSchema,
        service: ActorsService = Depends(get_actors_service),
        admin=Depends(get_current_admin),
):
    """
    **Admin-only: create an actor.**

    - **Returns:**
      - `ActorSchema`: The stored actor with its new ID.
    """
    return await service.add(Actor(**payload.model_dump()))


@router.put("/{actor_id}", response_model=ActorSchema)
async def edit_actor(
        actor_id: int,
        payload: ActorUpdateSchema,
        service: ActorsService = Depends(get_actors_service),
        admin=Depends(get_current_admin),
):
    """
    **Admin-only: replace an actor's details.**

    - **Raises:**
      - `HTTPException` 404: If the body ID differs from the path ID or the actor does not exist.
    """
    if payload.id != actor_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
    updated = await service.update(actor_id, Actor(**payload.model_dump()))
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
    return await service.get_by_id(actor_id)


@router.delete("/{actor_id}", response_model=MessageSchema)
async def delete_actor(
        actor_id: int,
        service: ActorsService = Depends(get_actors_service),
        admin=Depends(get_current_admin),
):
    """
    **Admin-only: delete an actor.**

    The actor's links to movies are removed with it.

    - **Raises:**
      - `HTTPException` 404: If the actor does not exist.
    """
    deleted = await service.delete(actor_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
    return {"message": "Actor deleted."}
