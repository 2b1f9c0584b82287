from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth import router as auth_router
from core import config, db, errors, log
from events import router as events_router
from movies import router as movies_router
from venues import router as venues_router

config.load_env()
log.configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, handed to requests through core.db.get_db.
    app.state.pool = await db.create_pool()
    try:
        yield
    finally:
        await app.state.pool.close()
        app.state.pool = None


app = FastAPI(title="ticketing-api", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
errors.install_handlers(app)

app.include_router(auth_router.router, tags=["auth"])
app.include_router(movies_router.router, tags=["movies"])
app.include_router(events_router.router, tags=["events"])
app.include_router(venues_router.router, tags=["venues"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/ping")
def ping() -> dict:
    return {"status": "ok", "message": "pong"}


if __name__ == "__main__":
    import uvicorn

    logger.info("starting server host=%s port=%s", config.host(), config.port())
    uvicorn.run(app, host=config.host(), port=config.port())
