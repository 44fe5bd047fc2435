from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from eticket.database.models.movies import MovieCategory
from eticket.schemas.actors import ActorSchema
from eticket.schemas.cinemas import CinemaSchema
from eticket.schemas.producers import ProducerSchema


class MovieBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=250, description="The title of the movie.")
    description: str = Field(..., min_length=1, description="A brief summary of the movie's plot.")
    price: Decimal = Field(..., gt=0, decimal_places=2, description="The ticket price in $.")
    image_url: str = Field(..., description="URL of the movie poster.")
    start_date: datetime = Field(..., description="The first day the movie is screened.")
    end_date: datetime = Field(..., description="The last day the movie is screened.")
    movie_category: MovieCategory = Field(..., description="The category of the movie.")
    cinema_id: int = Field(..., description="The ID of the cinema screening the movie.")
    producer_id: int = Field(..., description="The ID of the movie's producer.")


class MovieCreateSchema(MovieBase):
    """
    Schema for creating a new movie together with its cast.
    """
    actor_ids: List[int] = Field(..., min_length=1, example=[1, 2],
                                 description="IDs of the actors starring in the movie.")

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("End date must not be before start date")
        return self


class MovieUpdateSchema(MovieCreateSchema):
    """
    Schema for editing a movie; the cast is replaced by ``actor_ids``.
    """
    id: int = Field(..., description="The ID of the movie being edited; must match the path.")


class MovieSchema(MovieBase):
    id: int = Field(..., description="The unique ID of the movie.")
    cinema_id: Optional[int] = Field(None, description="The ID of the cinema screening the movie, if it still exists.")
    producer_id: Optional[int] = Field(None, description="The ID of the movie's producer, if it still exists.")
    cinema: Optional[CinemaSchema] = Field(None, description="The cinema screening the movie.")

    class Config:
        from_attributes = True


class ActorLinkSchema(BaseModel):
    actor_id: int
    actor: ActorSchema

    class Config:
        from_attributes = True


class MovieDetailSchema(MovieSchema):
    producer: Optional[ProducerSchema] = Field(None, description="The movie's producer.")
    actors_movies: List[ActorLinkSchema] = Field(..., description="The actors starring in the movie.")


class MovieDropdownsSchema(BaseModel):
    """
    Choices for the cinema, producer and actor fields of the movie form.
    """
    cinemas: List[CinemaSchema]
    producers: List[ProducerSchema]
    actors: List[ActorSchema]
