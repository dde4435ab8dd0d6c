from datetime import datetime, timezone
from typing import Annotated, Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from app.db.base import BIGINT_MAX, BIGINT_MIN, INT_MIN
from app.schemas.movie import MovieResponse

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

AvailableSeats = Annotated[int, Field(ge=INT_MIN, le=50)]
MovieId = Annotated[int, Field(ge=BIGINT_MIN, le=BIGINT_MAX)]


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class ScreeningCreate(BaseModel):
    date: datetime
    available_seats: AvailableSeats
    movie_id: MovieId

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)


class ScreeningUpdate(BaseModel):
    date: Optional[datetime] = None
    available_seats: Optional[AvailableSeats] = None
    movie_id: Optional[MovieId] = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)


class ScreeningResponse(BaseModel):
    id: int
    date: datetime
    available_seats: int
    movie: MovieResponse

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("date")
    def serialize_date(self, value: datetime) -> str:
        return value.strftime(DATE_FORMAT)
