import asyncio
import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import func, select

from app.db.session import async_session as AsyncSessionLocal, init_db
from app.models import Movie, Screening

logger = logging.getLogger(__name__)

MOVIES = [
    {
        "title": "Interstellar",
        "description": "A group of explorers travel through a wormhole in space.",
        "age_limit": 12,
        "language": "English",
        "cover_art": "https://via.placeholder.com/200x300.png?text=Interstellar",
    },
    {
        "title": "Amelie",
        "description": "A shy waitress decides to change the lives of those around her.",
        "age_limit": 12,
        "language": "French",
        "cover_art": "https://via.placeholder.com/200x300.png?text=Amelie",
    },
    {
        "title": "Oldboy",
        "description": "A man imprisoned for fifteen years hunts for his captor.",
        "age_limit": 18,
        "language": "Korean",
        "cover_art": "https://via.placeholder.com/200x300.png?text=Oldboy",
    },
    {
        "title": "Spirited Away",
        "description": "A girl wanders into a world ruled by gods and spirits.",
        "age_limit": 6,
        "language": "Japanese",
        "cover_art": "https://via.placeholder.com/200x300.png?text=Spirited+Away",
    },
]


async def seed():
    async with AsyncSessionLocal() as session:
        existing = await session.scalar(select(func.count(Movie.id)))
        if existing:
            logger.info("Movies already present, skipping seed")
            return

        movies = [Movie(**data) for data in MOVIES]
        session.add_all(movies)
        await session.flush()  # get movie ids

        # two evening screenings per movie, starting tomorrow
        start = datetime.now(timezone.utc).replace(tzinfo=None, hour=18, minute=0, second=0, microsecond=0) + timedelta(days=1)
        screenings = []
        for offset, movie in enumerate(movies):
            for slot in range(2):
                screenings.append(Screening(
                    movie_id=movie.id,
                    date=start + timedelta(days=offset, hours=slot * 3),
                    available_seats=30 + slot * 10,
                ))
        session.add_all(screenings)

        await session.commit()
        logger.info(f"Seeded {len(movies)} movies and {len(screenings)} screenings")


async def main():
    await init_db()
    await seed()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
