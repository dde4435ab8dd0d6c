from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import getDB_session


router = APIRouter()


@router.get("/health", summary="Basic health check endpoint", description="Checks that the database answers a trivial query.")
async def health_check(db: AsyncSession = Depends(getDB_session)):
    await db.execute(text("SELECT 1"))
    return {"status": "ok"}
