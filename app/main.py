from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.routes import health_router
from app.api.v1 import v1_router
from app.config.settings import settings
from app.core.db import engine
from app.core.logging_config import setup_logging
from app.infrastructure.db import models  # noqa: F401  (registers tables on Base.metadata)
from app.infrastructure.db.base import Base


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if settings.ENVIRONMENT == "dev":
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

app.include_router(health_router)
app.include_router(v1_router)
