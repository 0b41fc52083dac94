from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from characters import router as characters_router
from core import config
from core.db import Database
from core.error_handlers import register_error_handlers
from core.log import setup_logging
from core.schema import ensure_schema
from factions import router as factions_router
from races import router as races_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.log_level(), config.log_format())

    # One pool per process, shared by every request through app.state.
    database = Database(
        config.database_url(),
        min_size=config.pool_min_size(),
        max_size=config.pool_max_size(),
        command_timeout=config.command_timeout(),
    )
    await database.connect()
    try:
        if config.schema_auto_create():
            await ensure_schema(database)
        app.state.database = database
        yield
    finally:
        app.state.database = None
        await database.close()


app = FastAPI(title="Warhammer Lore API", lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(races_router.router, tags=["races"])
app.include_router(factions_router.router, tags=["factions"])
app.include_router(characters_router.router, tags=["characters"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "warhammer lore api"}
