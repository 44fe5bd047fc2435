import logging

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from eticket.crud.base import EntityBaseRepository
from eticket.database.models.movies import Movie, ActorMovie, Actor, Cinema, Producer
from eticket.database.session import get_db
from eticket.exceptions import RelatedEntityNotFoundError
from eticket.schemas.movies import MovieCreateSchema, MovieUpdateSchema

logger = logging.getLogger(__name__)

MOVIE_DETAIL_RELATIONS = (
    Movie.cinema,
    Movie.producer,
    (Movie.actors_movies, ActorMovie.actor),
)


class MoviesService(EntityBaseRepository[Movie]):
    model = Movie

    async def get_movie_by_id(self, movie_id: int) -> Movie | None:
        return await self.get_by_id(movie_id, *MOVIE_DETAIL_RELATIONS)

    async def get_new_movie_dropdowns_values(self) -> dict:
        cinemas = await self.db.execute(select(Cinema).order_by(Cinema.name))
        producers = await self.db.execute(select(Producer).order_by(Producer.full_name))
        actors = await self.db.execute(select(Actor).order_by(Actor.full_name))
        return {
            "cinemas": cinemas.scalars().all(),
            "producers": producers.scalars().all(),
            "actors": actors.scalars().all(),
        }

    async def _check_references(self, data: MovieCreateSchema) -> None:
        """Raise ``RelatedEntityNotFoundError`` for the first missing cinema, producer or actors."""
        if await self.db.get(Cinema, data.cinema_id) is None:
            raise RelatedEntityNotFoundError("Cinema", [data.cinema_id])
        if await self.db.get(Producer, data.producer_id) is None:
            raise RelatedEntityNotFoundError("Producer", [data.producer_id])
        actor_ids = set(data.actor_ids)
        result = await self.db.execute(select(Actor.id).where(Actor.id.in_(actor_ids)))
        missing = actor_ids - set(result.scalars().all())
        if missing:
            raise RelatedEntityNotFoundError("Actor", sorted(missing))

    async def add_new_movie(self, data: MovieCreateSchema) -> Movie:
        """Insert the movie and its actor links as one unit of work."""
        await self._check_references(data)
        movie = Movie(**data.model_dump(exclude={"actor_ids"}))
        try:
            self.db.add(movie)
            await self.db.flush()
            for actor_id in dict.fromkeys(data.actor_ids):
                self.db.add(ActorMovie(actor_id=actor_id, movie_id=movie.id))
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        logger.info("Created movie id=%s with %d actors", movie.id, len(data.actor_ids))
        return movie

    async def update_movie(self, data: MovieUpdateSchema) -> bool:
        movie = await self.get_by_id(data.id, Movie.actors_movies)
        if movie is None:
            return False
        await self._check_references(data)

        for field, value in data.model_dump(exclude={"id", "actor_ids"}).items():
            setattr(movie, field, value)

        # full replace of the cast; orphaned links are deleted on flush
        movie.actors_movies = [
            ActorMovie(actor_id=actor_id, movie_id=movie.id)
            for actor_id in dict.fromkeys(data.actor_ids)
        ]

        await self._commit()
        logger.info("Updated movie id=%s", movie.id)
        return True

    async def filter_movies(self, search_string: str | None = None) -> list[Movie]:
        movies = await self.get_all(Movie.cinema)
        if not search_string:
            return movies
        return [
            movie for movie in movies
            if search_string in movie.name or search_string in movie.description
        ]


def get_movies_service(db: AsyncSession = Depends(get_db)) -> MoviesService:
    return MoviesService(db)
