import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from eticket.crud.movies import MoviesService, get_movies_service
from eticket.crud.orders import OrdersService, get_orders_service
from eticket.crud.shopping_cart import ShoppingCart, get_shopping_cart
from eticket.deps import get_current_user
from eticket.schemas.orders import OrderSchema, ShoppingCartSchema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


async def _get_movie_or_404(movie_id: int, movies: MoviesService):
    movie = await movies.get_by_id(movie_id)
    if not movie:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found.")
    return movie


@router.get("/", response_model=List[OrderSchema])
async def list_orders(
        orders: OrdersService = Depends(get_orders_service),
        user=Depends(get_current_user),
):
    """
    **List orders.**

    A regular user sees only their own orders. An admin sees every order.
    The newest orders come first.

    - **Returns:**
      - A list of orders with their items.
    """
    return await orders.get_orders_by_user_id_and_role(user.id, user.role)


@router.get("/shopping-cart", response_model=ShoppingCartSchema)
async def get_cart(cart: ShoppingCart = Depends(get_shopping_cart)):
    """
    **Show the current user's shopping cart.**

    - **Returns:**
      - `ShoppingCartSchema`: The cart lines and their total.
    """
    items = await cart.get_items()
    return {"items": items, "total": await cart.get_total()}


@router.post("/shopping-cart/add/{movie_id}", response_model=ShoppingCartSchema)
async def add_item_to_cart(
        movie_id: int,
        cart: ShoppingCart = Depends(get_shopping_cart),
        movies: MoviesService = Depends(get_movies_service),
):
    """
    **Add one ticket for a movie to the cart.**

    Adding a movie that is already in the cart increases its amount by one.

    - **Raises:**
      - `HTTPException` 404: If the movie does not exist.
    """
    movie = await _get_movie_or_404(movie_id, movies)
    await cart.add_item(movie)
    return await get_cart(cart)


@router.delete("/shopping-cart/remove/{movie_id}", response_model=ShoppingCartSchema)
async def remove_item_from_cart(
        movie_id: int,
        cart: ShoppingCart = Depends(get_shopping_cart),
        movies: MoviesService = Depends(get_movies_service),
):
    """
    **Remove one ticket for a movie from the cart.**

    The line disappears once its amount would drop to zero. Removing a
    movie that is not in the cart leaves the cart unchanged.

    - **Raises:**
      - `HTTPException` 404: If the movie does not exist.
    """
    movie = await _get_movie_or_404(movie_id, movies)
    await cart.remove_item(movie)
    return await get_cart(cart)


@router.post("/complete", response_model=OrderSchema, status_code=status.HTTP_201_CREATED)
async def complete_order(
        cart: ShoppingCart = Depends(get_shopping_cart),
        orders: OrdersService = Depends(get_orders_service),
        user=Depends(get_current_user),
):
    """
    **Turn the cart into an order.**

    The cart lines are stored as an order at the current movie prices and
    the cart is emptied.

    - **Raises:**
      - `HTTPException` 400: If the cart is empty.

    - **Returns:**
      - `OrderSchema`: The stored order.
    """
    items = await cart.get_items()
    if not items:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Your shopping cart is empty.")
    order = await orders.store_order(items, user.id, user.email)
    await cart.clear()
    logger.info("User id=%s completed order id=%s", user.id, order.id)
    return order
