from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from eticket.crud.movies import MoviesService, get_movies_service
from eticket.database.models.movies import Movie
from eticket.deps import get_current_admin
from eticket.exceptions import RelatedEntityNotFoundError
from eticket.schemas.common import MessageSchema
from eticket.schemas.movies import (
    MovieSchema,
    MovieDetailSchema,
    MovieCreateSchema,
    MovieUpdateSchema,
    MovieDropdownsSchema,
)

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("/", response_model=List[MovieSchema])
async def list_movies(service: MoviesService = Depends(get_movies_service)):
    """
    **List all movies.**

    Each movie is returned with the cinema screening it.
    """
    return await service.get_all(Movie.cinema)


@router.get("/filter", response_model=List[MovieSchema])
async def filter_movies(
        search_string: Optional[str] = Query(None, description="Case-sensitive text matched against name and description."),
        service: MoviesService = Depends(get_movies_service),
):
    """
    **Search movies by name or description.**

    A movie matches when `search_string` occurs in its name or its
    description. The match is case-sensitive. An empty or missing
    `search_string` returns every movie.

    - **Returns:**
      - A list of matching movies with their cinema.
    """
    return await service.filter_movies(search_string)


@router.get("/dropdowns", response_model=MovieDropdownsSchema)
async def get_dropdowns(
        service: MoviesService = Depends(get_movies_service),
        admin=Depends(get_current_admin),
):
    """
    **Admin-only: choices for the movie form.**

    - **Returns:**
      - Cinemas, producers and actors, each ordered by name.
    """
    return await service.get_new_movie_dropdowns_values()


@router.get("/{movie_id}", response_model=MovieDetailSchema)
async def get_movie(movie_id: int, service: MoviesService = Depends(get_movies_service)):
    """
    **Retrieve a movie by ID.**

    Returns the movie with its cinema, its producer and its actors.

    - **Raises:**
      - `HTTPException` 404: If the movie does not exist.
    """
    movie = await service.get_movie_by_id(movie_id)
    if not movie:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found.")
    return movie


@router.post("/", response_model=MovieDetailSchema, status_code=status.HTTP_201_CREATED)
async def create_movie(
        payload: MovieCreateSchema,
        service: MoviesService = Depends(get_movies_service),
        admin=Depends(get_current_admin),
):
    """
    **Admin-only: create a movie with its cast.**

    The movie and its actor links are stored in one transaction; if any
    link cannot be stored, nothing is.

    - **Raises:**
      - `HTTPException` 422: If the cinema, the producer or an actor does not exist.

    - **Returns:**
      - `MovieDetailSchema`: The stored movie with its relations.
    """
    try:
        movie = await service.add_new_movie(payload)
    except RelatedEntityNotFoundError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return await service.get_movie_by_id(movie.id)


@router.put("/{movie_id}", response_model=MovieDetailSchema)
async def edit_movie(
        movie_id: int,
        payload: MovieUpdateSchema,
        service: MoviesService = Depends(get_movies_service),
        admin=Depends(get_current_admin),
):
    """
    **Admin-only: edit a movie and replace its cast.**

    - **Raises:**
      - `HTTPException` 404: If the body ID differs from the path ID or the movie does not exist.
      - `HTTPException` 422: If the cinema, the producer or an actor does not exist.
    """
    if payload.id != movie_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found.")
    try:
        updated = await service.update_movie(payload)
    except RelatedEntityNotFoundError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found.")
    return await service.get_movie_by_id(movie_id)


@router.delete("/{movie_id}", response_model=MessageSchema)
async def delete_movie(
        movie_id: int,
        service: MoviesService = Depends(get_movies_service),
        admin=Depends(get_current_admin),
):
    """
    **Admin-only: delete a movie.**

    - **Raises:**
      - `HTTPException` 404: If the movie does not exist.
    """
    if not await service.delete(movie_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found.")
    return {"message": "Movie deleted."}
