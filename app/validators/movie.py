from app.schemas.movie import MovieCreate, MovieUpdate
from app.validators.base import RequestValidator

MOVIE_MESSAGES = {
    "title.required": "A title is required for the movie.",
    "title.string": "The title must be a string.",
    "title.max": "The title must not exceed 255 characters.",
    "description.required": "Please provide a description for the movie.",
    "description.string": "The description must be a string.",
    "description.max": "The description must not exceed 255 characters.",
    "description.min": "The description must be at least 10 characters.",
    "age_limit.required": "Age limit is required.",
    "age_limit.integer": "Age limit must be a number.",
    "age_limit.min": "Age limit is out of range.",
    "age_limit.max": "Age limit is out of range.",
    "language.required": "The movie language is required.",
    "language.string": "The language must be a string.",
    "language.max": "The language must not exceed 25 characters.",
    "cover_art.required": "Please provide a cover art URL for the movie.",
    "cover_art.string": "The cover art URL must be a string.",
    "cover_art.max": "The cover art URL must not exceed 255 characters.",
}

MOVIE_UPDATE_MESSAGES = {
    **MOVIE_MESSAGES,
    "age_limit.min": "Age limit must be at least 0.",
    "age_limit.max": "Age limit must not be greater than 18.",
}

movie_create_validator = RequestValidator(MovieCreate, messages=MOVIE_MESSAGES)
movie_update_validator = RequestValidator(MovieUpdate, messages=MOVIE_UPDATE_MESSAGES, partial=True)
