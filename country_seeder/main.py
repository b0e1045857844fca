from contextlib import asynccontextmanager

from fastapi import FastAPI

from country_seeder.config import settings
from country_seeder.countries.router import router as countries_router
from country_seeder.database import connect_db, disconnect_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_db()
    yield
    await disconnect_db()


app = FastAPI(
    title="Country Seeder",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DOCS_ENABLED else None,
    redoc_url="/redoc" if settings.DOCS_ENABLED else None,
    openapi_url="/openapi.json" if settings.DOCS_ENABLED else None,
)

app.include_router(countries_router)


@app.get("/health")
async def health_check():
    return {"status": "ok"}
