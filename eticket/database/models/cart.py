from sqlalchemy import ForeignKey, String, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eticket.database.models.base import EntityBase


class ShoppingCartItem(EntityBase):
    __tablename__ = "shopping_cart_items"
    __table_args__ = (
        UniqueConstraint("shopping_cart_id", "movie_id", name="uix_cart_movie"),
        CheckConstraint("amount >= 1", name="ck_cart_item_amount_positive"),
    )

    shopping_cart_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    movie_id: Mapped[int] = mapped_column(ForeignKey("movies.id", ondelete="CASCADE"), nullable=False)
    amount: Mapped[int] = mapped_column(nullable=False, default=1)

    movie: Mapped["Movie"] = relationship()

    def __repr__(self) -> str:
        return (
            f"<ShoppingCartItem(id={self.id}, shopping_cart_id={self.shopping_cart_id}, "
            f"movie_id={self.movie_id}, amount={self.amount})>"
        )
