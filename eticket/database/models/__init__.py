from eticket.database.models.base import Base, EntityBase
from eticket.database.models.user import UserRoles, UserGroup, User, RefreshToken
from eticket.database.models.movies import MovieCategory, Actor, Producer, Cinema, Movie, ActorMovie
from eticket.database.models.cart import ShoppingCartItem
from eticket.database.models.orders import Order, OrderItem
