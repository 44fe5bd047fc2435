import enum
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import String, Text, ForeignKey, DECIMAL, Enum, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eticket.database.models.base import Base, EntityBase


class MovieCategory(str, enum.Enum):
    Action = "Action"
    Comedy = "Comedy"
    Drama = "Drama"
    Documentary = "Documentary"
    Cartoons = "Cartoons"
    Horror = "Horror"


class Actor(EntityBase):
    __tablename__ = "actors"

    full_name: Mapped[str] = mapped_column(String(50), nullable=False)
    profile_picture_url: Mapped[str] = mapped_column(String(500), nullable=False)
    bio: Mapped[str] = mapped_column(Text, nullable=False)

    actors_movies: Mapped[list["ActorMovie"]] = relationship(
        back_populates="actor", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Actor(id={self.id}, full_name={self.full_name})>"


class Producer(EntityBase):
    __tablename__ = "producers"

    full_name: Mapped[str] = mapped_column(String(50), nullable=False)
    profile_picture_url: Mapped[str] = mapped_column(String(500), nullable=False)
    bio: Mapped[str] = mapped_column(Text, nullable=False)

    # dependent movies are left to the database on delete
    movies: Mapped[list["Movie"]] = relationship(back_populates="producer", passive_deletes="all")

    def __repr__(self) -> str:
        return f"<Producer(id={self.id}, full_name={self.full_name})>"


class Cinema(EntityBase):
    __tablename__ = "cinemas"

    logo: Mapped[str] = mapped_column(String(500), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    movies: Mapped[list["Movie"]] = relationship(back_populates="cinema", passive_deletes="all")

    def __repr__(self) -> str:
        return f"<Cinema(id={self.id}, name={self.name})>"


class Movie(EntityBase):
    __tablename__ = "movies"

    name: Mapped[str] = mapped_column(String(250), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(DECIMAL(10, 2), nullable=False)
    image_url: Mapped[str] = mapped_column(String(500), nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    movie_category: Mapped[MovieCategory] = mapped_column(Enum(MovieCategory), nullable=False)

    # a deleted cinema or producer leaves the movie in place, unassigned
    cinema_id: Mapped[Optional[int]] = mapped_column(ForeignKey("cinemas.id", ondelete="SET NULL"))
    producer_id: Mapped[Optional[int]] = mapped_column(ForeignKey("producers.id", ondelete="SET NULL"))

    cinema: Mapped[Optional["Cinema"]] = relationship(back_populates="movies")
    producer: Mapped[Optional["Producer"]] = relationship(back_populates="movies")
    actors_movies: Mapped[list["ActorMovie"]] = relationship(
        back_populates="movie", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, name={self.name}, price={self.price})>"


class ActorMovie(Base):
    __tablename__ = "actors_movies"

    actor_id: Mapped[int] = mapped_column(ForeignKey("actors.id", ondelete="CASCADE"), primary_key=True)
    movie_id: Mapped[int] = mapped_column(ForeignKey("movies.id", ondelete="CASCADE"), primary_key=True)

    actor: Mapped["Actor"] = relationship(back_populates="actors_movies")
    movie: Mapped["Movie"] = relationship(back_populates="actors_movies")
