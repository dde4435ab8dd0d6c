import pytest
from datetime import datetime
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from app.app import app as fastapi_app
from app.core.config import settings
from app.db.base import Base
from app.db.session import getDB_session
from app.models import Movie, Screening


@pytest.fixture
async def db_engine(tmp_path):
    """Create a database engine for the tests.

    Uses TEST_DATABASE_URL when set, otherwise a throwaway SQLite file.
    """
    test_db_url = settings.TEST_DATABASE_URL or f"sqlite+aiosqlite:///{tmp_path / 'cinema_test.db'}"
    engine = create_async_engine(test_db_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)  # Clean slate
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_session_factory(db_engine):
    return async_sessionmaker(
        bind=db_engine,
        autoflush=False,
        expire_on_commit=False
    )


@pytest.fixture
async def db_session(db_session_factory):
    async with db_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def seeded_test_data(db_session_factory):
    """Seed three movies and three screenings; the third movie has none."""
    async with db_session_factory() as session:
        movies = [
            Movie(
                title=f"Test Movie {i}",
                description=f"A test movie number {i} for testing",
                age_limit=12 + i,
                language="English",
                cover_art=f"https://via.placeholder.com/200x300.png?text=movie+{i}",
            )
            for i in range(3)
        ]
        session.add_all(movies)
        await session.flush()

        screenings = [
            Screening(movie_id=movies[0].id, date=datetime(2025, 5, 15, 19, 30), available_seats=30),
            Screening(movie_id=movies[0].id, date=datetime(2025, 5, 16, 21, 0), available_seats=20),
            Screening(movie_id=movies[1].id, date=datetime(2025, 5, 17, 18, 0), available_seats=45),
        ]
        session.add_all(screenings)
        await session.commit()

        yield {
            "movie_ids": [m.id for m in movies],
            "screening_ids": [s.id for s in screenings],
        }


@pytest.fixture
async def client(db_session_factory):
    """HTTP client bound to the app with the test database swapped in."""
    async def override_db_session():
        async with db_session_factory() as session:
            yield session
            await session.rollback()

    fastapi_app.dependency_overrides[getDB_session] = override_db_session
    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://test") as http_client:
        yield http_client
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def api():
    return settings.API_PREFIX
