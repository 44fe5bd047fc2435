import asyncio
import logging
import weakref
from decimal import Decimal

from fastapi import Depends
from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from eticket.database.models.cart import ShoppingCartItem
from eticket.database.models.movies import Movie
from eticket.database.models.user import User
from eticket.database.session import get_db
from eticket.deps import get_current_user

logger = logging.getLogger(__name__)

# a lock lives only while some coroutine holds or awaits it
_cart_locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()


class ShoppingCart:
    """
    The cart of one user, backed by ``shopping_cart_items`` rows.

    A cart is created lazily: it exists as soon as it holds a line. Lines are
    merged by movie, so a movie appears at most once with ``amount >= 1``.
    Mutations of the same cart are serialised by a per-cart lock.
    """

    def __init__(self, db: AsyncSession, shopping_cart_id: str):
        self.db = db
        self.shopping_cart_id = shopping_cart_id

    @property
    def _lock(self) -> asyncio.Lock:
        lock = _cart_locks.get(self.shopping_cart_id)
        if lock is None:
            lock = _cart_locks[self.shopping_cart_id] = asyncio.Lock()
        return lock

    async def _get_line(self, movie_id: int) -> ShoppingCartItem | None:
        stmt = select(ShoppingCartItem).where(
            ShoppingCartItem.shopping_cart_id == self.shopping_cart_id,
            ShoppingCartItem.movie_id == movie_id,
        ).execution_options(populate_existing=True)
        return await self.db.scalar(stmt)

    async def add_item(self, movie: Movie) -> None:
        async with self._lock:
            line = await self._get_line(movie.id)
            if line is None:
                self.db.add(ShoppingCartItem(shopping_cart_id=self.shopping_cart_id, movie_id=movie.id, amount=1))
            else:
                await self.db.execute(
                    update(ShoppingCartItem)
                    .where(ShoppingCartItem.id == line.id)
                    .values(amount=ShoppingCartItem.amount + 1)
                    .execution_options(synchronize_session=False)
                )
            await self._commit()

    async def remove_item(self, movie: Movie) -> None:
        async with self._lock:
            line = await self._get_line(movie.id)
            if line is None:
                return
            if line.amount > 1:
                await self.db.execute(
                    update(ShoppingCartItem)
                    .where(ShoppingCartItem.id == line.id)
                    .values(amount=ShoppingCartItem.amount - 1)
                    .execution_options(synchronize_session=False)
                )
            else:
                await self.db.delete(line)
            await self._commit()

    async def get_items(self) -> list[ShoppingCartItem]:
        stmt = (
            select(ShoppingCartItem)
            .options(selectinload(ShoppingCartItem.movie).selectinload(Movie.cinema))
            .where(ShoppingCartItem.shopping_cart_id == self.shopping_cart_id)
            .order_by(ShoppingCartItem.id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_total(self) -> Decimal:
        items = await self.get_items()
        return sum((item.movie.price * item.amount for item in items), Decimal("0.00"))

    async def clear(self) -> None:
        async with self._lock:
            await self.db.execute(
                delete(ShoppingCartItem)
                .where(ShoppingCartItem.shopping_cart_id == self.shopping_cart_id)
                .execution_options(synchronize_session=False)
            )
            await self._commit()
        logger.info("Cleared shopping cart %s", self.shopping_cart_id)

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise


def get_shopping_cart(
        db: AsyncSession = Depends(get_db),
        user: User = Depends(get_current_user),
) -> ShoppingCart:
    return ShoppingCart(db, str(user.id))
