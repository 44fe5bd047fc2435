import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from eticket.config.settings import settings
from eticket.crud.auth import seed_roles, seed_admin
from eticket.database.models import Base
from eticket.database.session import engine, SessionLocal
from eticket.routes.account import router as account_router
from eticket.routes.actors import router as actors_router
from eticket.routes.cinemas import router as cinemas_router
from eticket.routes.movies import router as movies_router
from eticket.routes.orders import router as orders_router
from eticket.routes.producers import router as producers_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with SessionLocal() as db:
        await seed_roles(db)
        await seed_admin(db)
    logger.info("eTickets started (%s)", settings.ENVIRONMENT)
    yield
    await engine.dispose()


if settings.ENVIRONMENT == "production":
    app = FastAPI(docs_url=None, redoc_url=None, lifespan=lifespan)
else:
    app = FastAPI(
        title="eTickets API",
        description="An API for selling movie tickets: the catalogue of movies, actors, cinemas and producers, "
                    "a shopping cart and orders",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "movies", "description": "Endpoints for retrieving, searching and managing movies."},
            {"name": "actors", "description": "Endpoints for retrieving and managing actors."},
            {"name": "cinemas", "description": "Endpoints for retrieving and managing cinemas."},
            {"name": "producers", "description": "Endpoints for retrieving and managing producers."},
            {"name": "orders", "description": "The shopping cart and the orders placed from it."},
            {"name": "account", "description": "Registration, authentication and user management."},
        ]
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Internal server error"})


app.include_router(account_router)
app.include_router(movies_router)
app.include_router(actors_router)
app.include_router(cinemas_router)
app.include_router(producers_router)
app.include_router(orders_router)
