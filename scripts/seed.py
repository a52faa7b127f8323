#!/usr/bin/env python3
"""
Seed an admin account and the default domains. Safe to run repeatedly.

Usage:
  python scripts/seed.py
  # Requires DATABASE_URL and SECRET_KEY in .env (or export)
"""
import asyncio
import os
import sys

from dotenv import load_dotenv

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
# Load .env from project root
load_dotenv(os.path.join(_root, ".env"))
# Add project root to path
sys.path.insert(0, _root)

from sqlalchemy import select

from app.core.logging import setup_logging, get_logger
from app.core.security import get_password_hash
from app.database import AsyncSessionLocal, close_db
from app.models import Domain, User, Role

logger = get_logger("seed")

ADMIN_USERNAME = "admin"
ADMIN_EMAIL = os.getenv("SEED_ADMIN_EMAIL", "admin@example.com")
ADMIN_PASSWORD = os.getenv("SEED_ADMIN_PASSWORD", "password123")
DOMAINS = ["AIML", "Cyber Security", "Web Dev"]


async def seed() -> None:
    async with AsyncSessionLocal() as db:
        existing = await db.execute(select(User).where(User.username == ADMIN_USERNAME))
        if existing.scalar_one_or_none() is None:
            db.add(User(
                username=ADMIN_USERNAME,
                email=ADMIN_EMAIL,
                password_hash=get_password_hash(ADMIN_PASSWORD),
                role=Role.ADMIN,
            ))
            logger.info("Admin user created", extra={"username": ADMIN_USERNAME})

        for name in DOMAINS:
            found = await db.execute(select(Domain).where(Domain.name == name))
            if found.scalar_one_or_none() is None:
                db.add(Domain(name=name, description=f"{name} Domain"))
                logger.info("Domain created", extra={"domain": name})

        await db.commit()
    await close_db()


def main():
    setup_logging()
    asyncio.run(seed())


if __name__ == "__main__":
    main()
