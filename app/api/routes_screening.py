import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ScreeningNotFoundError, PersistenceError
from app.crud.screening import crud_screening
from app.db.session import getDB_session
from app.schemas.movie import MessageResponse
from app.schemas.screening import ScreeningCreate, ScreeningResponse, ScreeningUpdate
from app.validators.base import RecordId, validated
from app.validators.screening import screening_create_validator, screening_update_validator

router = APIRouter(prefix="/screenings", tags=["Screenings"])
logger = logging.getLogger(__name__)


@router.get("/list", response_model=list[ScreeningResponse])
async def list_screenings(db: AsyncSession = Depends(getDB_session)):
    try:
        return await crud_screening.all(db)
    except Exception as e:
        logger.error(f"Failed to fetch screenings: {e}", exc_info=True)
        raise PersistenceError("Error during fetching screenings")


@router.post("/create", response_model=ScreeningResponse)
async def create_screening(
        screening: ScreeningCreate = Depends(validated(screening_create_validator)),
        db: AsyncSession = Depends(getDB_session)):
    try:
        return await crud_screening.create(db, screening.model_dump())
    except Exception as e:
        logger.error(f"Failed to create screening: {e}", exc_info=True)
        raise PersistenceError("Error during screening creation")


@router.get("/get/{screening_id}", response_model=ScreeningResponse)
async def get_screening(screening_id: RecordId, db: AsyncSession = Depends(getDB_session)):
    try:
        return await crud_screening.find(db, screening_id)
    except ScreeningNotFoundError:
        logger.info(f"Screening {screening_id} not found")
        raise
    except Exception as e:
        logger.error(f"Failed to get screening {screening_id}: {e}", exc_info=True)
        raise PersistenceError("Error during fetching screening")


@router.post("/update/{screening_id}", response_model=ScreeningResponse)
async def update_screening(
        screening_id: RecordId,
        screening: ScreeningUpdate = Depends(validated(screening_update_validator)),
        db: AsyncSession = Depends(getDB_session)):
    try:
        return await crud_screening.update(db, screening_id, screening.model_dump(exclude_unset=True))
    except ScreeningNotFoundError:
        logger.info(f"Screening {screening_id} not found for update")
        raise
    except Exception as e:
        logger.error(f"Failed to update screening {screening_id}: {e}", exc_info=True)
        raise PersistenceError("Error during screening update")


@router.delete("/delete/{screening_id}", response_model=MessageResponse)
async def delete_screening(screening_id: RecordId, db: AsyncSession = Depends(getDB_session)):
    try:
        if await crud_screening.delete(db, screening_id):
            return MessageResponse(message="Screening deleted successfully")
        raise ScreeningNotFoundError()
    except ScreeningNotFoundError:
        logger.info(f"Screening {screening_id} not found for deletion")
        raise
    except Exception as e:
        logger.error(f"Failed to delete screening {screening_id}: {e}", exc_info=True)
        raise PersistenceError("Error during screening deletion")
