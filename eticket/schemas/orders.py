from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from eticket.schemas.movies import MovieSchema


class MovieInOrder(BaseModel):
    id: int
    name: str
    image_url: str

    class Config:
        from_attributes = True


class OrderItemSchema(BaseModel):
    id: int = Field(..., description="The unique ID of the order item.")
    movie_id: Optional[int] = Field(None, description="The ID of the purchased movie; empty once the movie is deleted.")
    amount: int = Field(..., description="The number of tickets bought.")
    price: Decimal = Field(..., description="The unit price at the time of purchase.")
    movie: Optional[MovieInOrder] = None

    class Config:
        from_attributes = True


class OrderSchema(BaseModel):
    """
    Schema for an order.
    """
    id: int = Field(..., description="The unique ID of the order.")
    user_id: int = Field(..., description="The ID of the user who placed the order.")
    email: str = Field(..., description="The email of the user who placed the order.")
    created_at: datetime = Field(..., description="When the order was placed.")
    total_amount: Decimal = Field(..., description="The total amount of the order.")
    items: List[OrderItemSchema] = Field(..., description="The items of the order.")

    class Config:
        from_attributes = True


class ShoppingCartItemSchema(BaseModel):
    """Schema for a single line of the shopping cart."""
    id: int = Field(..., description="The unique ID of the cart line.")
    amount: int = Field(..., description="The number of tickets for this movie.")
    movie: MovieSchema = Field(..., description="The movie this line refers to.")

    class Config:
        from_attributes = True


class ShoppingCartSchema(BaseModel):
    """Schema for the whole shopping cart."""
    items: List[ShoppingCartItemSchema] = Field(..., description="The lines currently in the cart.")
    total: Decimal = Field(..., description="Sum of price times amount over all lines.")
