from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orders_api.core.logging import setup_logging
from orders_api.core.config import settings
from orders_api.repositories import build_repository
from orders_api.api.errors import register_exception_handlers
from orders_api.api.middleware import configure_request_logging
from orders_api.api.orders import router as orders_router
from orders_api.api.health import router as health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()

    app.state.repository = await build_repository(settings.database_url)

    yield

    await app.state.repository.close()


app = FastAPI(
    title="Orders API",
    description="Order management service",
    version="0.1.0",
    lifespan=lifespan
)

cors_origins = settings.cors_origins.split(",") if settings.cors_origins else ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
configure_request_logging(app)
register_exception_handlers(app)

app.include_router(health_router)
app.include_router(orders_router)
