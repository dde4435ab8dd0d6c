from typing import Annotated, Optional
from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from app.db.base import INT_MAX, INT_MIN


def required_str(max_length: int, min_length: int = 1):
    # blank and whitespace-only values count as missing
    return Annotated[str, StringConstraints(strip_whitespace=True, min_length=min_length, max_length=max_length)]


Title = required_str(255)
Description = required_str(255)
Language = required_str(25)
CoverArt = required_str(255)
AgeLimit = Annotated[int, Field(ge=INT_MIN, le=INT_MAX)]


class MovieBase(BaseModel):
    title: Title
    description: Description
    age_limit: AgeLimit
    language: Language
    cover_art: CoverArt


class MovieCreate(MovieBase):
    pass


class MovieUpdate(BaseModel):
    # stricter than MovieCreate on description and age_limit, kept as shipped
    title: Optional[Title] = None
    description: Optional[required_str(255, min_length=10)] = None
    age_limit: Optional[Annotated[int, Field(ge=0, le=18)]] = None
    language: Optional[Language] = None
    cover_art: Optional[CoverArt] = None


class MovieResponse(BaseModel):
    id: int
    title: str
    description: str
    age_limit: int
    language: str
    cover_art: str

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str
