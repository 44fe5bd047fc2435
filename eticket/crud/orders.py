import logging
from decimal import Decimal
from typing import Sequence

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from eticket.crud.base import EntityBaseRepository
from eticket.database.models.cart import ShoppingCartItem
from eticket.database.models.orders import Order, OrderItem
from eticket.database.models.user import UserRoles
from eticket.database.session import get_db

logger = logging.getLogger(__name__)


class OrdersService(EntityBaseRepository[Order]):
    model = Order

    async def store_order(self, items: Sequence[ShoppingCartItem], user_id: int, user_email: str) -> Order:
        """
        Persist the cart lines as one order.

        Each order item keeps the movie's price at checkout time; the order
        total is computed here once and never recalculated.
        """
        order_items = [
            OrderItem(movie_id=item.movie_id, amount=item.amount, price=item.movie.price)
            for item in items
        ]
        total = sum((order_item.price * order_item.amount for order_item in order_items), Decimal("0.00"))

        order = Order(user_id=user_id, email=user_email, total_amount=total, items=order_items)
        self.db.add(order)
        await self._commit()
        logger.info("Stored order id=%s for user id=%s, total=%s", order.id, user_id, total)
        return await self.get_by_id(order.id, (Order.items, OrderItem.movie))

    async def get_orders_by_user_id_and_role(self, user_id: int, role: str) -> list[Order]:
        stmt = (
            select(Order)
            .options(selectinload(Order.items).selectinload(OrderItem.movie), selectinload(Order.user))
            .order_by(Order.created_at.desc(), Order.id.desc())
        )
        if role != UserRoles.ADMIN:
            stmt = stmt.where(Order.user_id == user_id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())


def get_orders_service(db: AsyncSession = Depends(get_db)) -> OrdersService:
    return OrdersService(db)
