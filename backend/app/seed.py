"""Seed script for the airports table."""

import asyncio

from sqlalchemy import select

from app.data.airports import airport_rows
from app.database import Base, async_session_factory, engine
from app.models.airport import Airport


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as db:
        # Check if already seeded
        result = await db.execute(select(Airport).limit(1))
        if result.scalar_one_or_none():
            print("Airports already seeded. Skipping.")
            return

        rows = airport_rows()
        for row in rows:
            db.add(Airport(**row))

        await db.commit()
        print(f"Created {len(rows)} airport entries")


if __name__ == "__main__":
    asyncio.run(seed())
