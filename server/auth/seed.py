"""Seed an initial user so a fresh deployment can sign in."""

from __future__ import annotations

import asyncio
import logging
import os
import uuid

from server.auth import database as db
from server.auth.passwords import hash_password

log = logging.getLogger(__name__)


async def seed_admin_user(email: str | None = None, password: str | None = None) -> dict | None:
    """Create the seed user unless it exists. Returns the user, or None if unconfigured.

    Falls back to ``SCRYPTAUTH_SEED_EMAIL`` / ``SCRYPTAUTH_SEED_PASSWORD``.
    """
    email = email or os.environ.get("SCRYPTAUTH_SEED_EMAIL")
    password = password or os.environ.get("SCRYPTAUTH_SEED_PASSWORD")
    if not email or not password:
        return None

    existing = await asyncio.to_thread(db.get_user_by_email, email)
    if existing:
        return existing

    user_id = str(uuid.uuid4())
    pw_hash = await hash_password(password)
    user = await asyncio.to_thread(db.create_user, user_id, email, pw_hash)
    log.info("Seeded user %s (%s)", user_id, email)
    return user


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    db.init_admin_db()
    if asyncio.run(seed_admin_user()) is None:
        log.warning("SCRYPTAUTH_SEED_EMAIL / SCRYPTAUTH_SEED_PASSWORD not set, nothing seeded")
