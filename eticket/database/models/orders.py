from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import ForeignKey, DECIMAL, String, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eticket.database.models.base import EntityBase


class Order(EntityBase):
    __tablename__ = "orders"

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True, nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(DECIMAL(10, 2), nullable=False)

    user: Mapped["User"] = relationship(back_populates="orders")
    items: Mapped[list["OrderItem"]] = relationship(back_populates="order", cascade="all, delete-orphan")

    def __repr__(self):
        return (
            f"<Order(id={self.id}, user_id={self.user_id}, "
            f"total_amount={self.total_amount})>"
        )


class OrderItem(EntityBase):
    __tablename__ = "order_items"

    order_id: Mapped[int] = mapped_column(ForeignKey("orders.id"), nullable=False)
    # purchases outlive the movie; the line keeps its price and amount
    movie_id: Mapped[Optional[int]] = mapped_column(ForeignKey("movies.id", ondelete="SET NULL"))
    amount: Mapped[int] = mapped_column(nullable=False)
    price: Mapped[Decimal] = mapped_column(DECIMAL(10, 2), nullable=False)

    order: Mapped["Order"] = relationship(back_populates="items")
    movie: Mapped[Optional["Movie"]] = relationship()
