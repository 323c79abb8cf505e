"""Email/password authentication for the scryptauth service."""

from server.auth.routes import router as auth_router

__all__ = ["auth_router"]
