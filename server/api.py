"""FastAPI server exposing email/password sign-in over scryptauth."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

from fastapi import FastAPI

import scryptauth
from server.auth.database import init_admin_db
from server.auth.routes import router as auth_router
from server.auth.seed import seed_admin_user
from server.models import HealthResponse

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_admin_db()
    seeded = await seed_admin_user()
    if seeded:
        log.info("Seed user available: %s", seeded["email"])
    yield


app = FastAPI(
    title="scryptauth",
    description="scrypt password hashing behind email/password sign-in.",
    version=scryptauth.__version__,
    lifespan=lifespan,
)

init_admin_db()
app.include_router(auth_router)


@app.get("/v1/health", response_model=HealthResponse)
def health():
    return HealthResponse(version=scryptauth.__version__)
