#!/usr/bin/env python
"""Seed an initial admin user for the application."""

import argparse
import asyncio
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from contactbook.core.password import hash_password
from contactbook.persistence.database import AsyncSessionLocal
from contactbook.persistence.repositories.user_repository import UserRepository


async def seed_admin(email: str, password: str) -> None:
    """Create the admin user unless one with this email exists."""
    async with AsyncSessionLocal() as session:
        user_repo = UserRepository(session)

        if await user_repo.get_by_email(email):
            print(f"Admin user already exists: {email}")
            return

        await user_repo.create(
            email=email,
            hashed_password=hash_password(password),
            role="admin",
        )
        print(f"Created admin user: {email}")
        print("Please change this password after first login!")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--email", default=os.environ.get("ADMIN_EMAIL", "admin@example.com"))
    parser.add_argument("--password", default=os.environ.get("ADMIN_PASSWORD"), required="ADMIN_PASSWORD" not in os.environ)
    args = parser.parse_args()

    asyncio.run(seed_admin(args.email, args.password))
