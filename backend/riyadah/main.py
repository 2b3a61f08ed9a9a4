# riyadah/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Configuration and DB
from riyadah.config import settings
from riyadah.core.db import init_db, close_db
from riyadah.core.errors import register_error_handlers
from riyadah.core.bootstrap import ensure_staff_accounts

from riyadah.api.v1.routers import auth, tournaments, rewards, games

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.on_event("startup")
async def on_startup():
    await init_db()
    # Ensure each staff partition has an account on first run
    await ensure_staff_accounts()
    logger.info("[startup] %s ready (env=%s)", settings.APP_NAME, settings.env)


@app.on_event("shutdown")
async def on_shutdown():
    await close_db()


# REST
app.include_router(auth.router, prefix="/api/v1")
app.include_router(tournaments.router, prefix="/api/v1")
app.include_router(rewards.router, prefix="/api/v1")
app.include_router(games.router, prefix="/api/v1")


@app.get("/")
def root():
    return {"message": "Riyadah Elite backend running"}


@app.get("/healthz")
def healthz():
    return {"ok": True}
