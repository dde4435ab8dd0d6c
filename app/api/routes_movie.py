import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import MovieNotFoundError, PersistenceError
from app.crud.movie import crud_movie
from app.db.session import getDB_session
from app.schemas.movie import MessageResponse, MovieCreate, MovieResponse, MovieUpdate
from app.validators.base import RecordId, validated
from app.validators.movie import movie_create_validator, movie_update_validator

router = APIRouter(prefix="/movies", tags=["Movies"])
logger = logging.getLogger(__name__)


@router.get("/list", response_model=list[MovieResponse])
async def list_movies(db: AsyncSession = Depends(getDB_session)):
    try:
        return await crud_movie.all(db)
    except Exception as e:
        logger.error(f"Failed to fetch movies: {e}", exc_info=True)
        raise PersistenceError("Error during fetching movies")


@router.post("/create", response_model=MovieResponse)
async def create_movie(
        movie: MovieCreate = Depends(validated(movie_create_validator)),
        db: AsyncSession = Depends(getDB_session)):
    try:
        return await crud_movie.create(db, movie.model_dump())
    except Exception as e:
        logger.error(f"Failed to create movie: {e}", exc_info=True)
        raise PersistenceError("Error during movie creation")


@router.get("/get/{movie_id}", response_model=MovieResponse)
async def get_movie(movie_id: RecordId, db: AsyncSession = Depends(getDB_session)):
    try:
        return await crud_movie.find(db, movie_id)
    except MovieNotFoundError:
        logger.info(f"Movie {movie_id} not found")
        raise
    except Exception as e:
        logger.error(f"Failed to get movie {movie_id}: {e}", exc_info=True)
        raise PersistenceError("Error during fetching movie")


@router.post("/update/{movie_id}", response_model=MovieResponse)
async def update_movie(
        movie_id: RecordId,
        movie: MovieUpdate = Depends(validated(movie_update_validator)),
        db: AsyncSession = Depends(getDB_session)):
    try:
        return await crud_movie.update(db, movie_id, movie.model_dump(exclude_unset=True))
    except MovieNotFoundError:
        logger.info(f"Movie {movie_id} not found for update")
        raise
    except Exception as e:
        logger.error(f"Failed to update movie {movie_id}: {e}", exc_info=True)
        raise PersistenceError("Error during movie update")


@router.delete("/delete/{movie_id}", response_model=MessageResponse)
async def delete_movie(movie_id: RecordId, db: AsyncSession = Depends(getDB_session)):
    try:
        if await crud_movie.delete(db, movie_id):
            return MessageResponse(message="Movie deleted successfully")
        raise MovieNotFoundError()
    except MovieNotFoundError:
        logger.info(f"Movie {movie_id} not found for deletion")
        raise
    except Exception as e:
        logger.error(f"Failed to delete movie {movie_id}: {e}", exc_info=True)
        raise PersistenceError("Error during movie deletion")
