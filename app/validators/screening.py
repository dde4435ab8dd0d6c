from app.models.movie import Movie
from app.schemas.screening import ScreeningCreate, ScreeningUpdate
from app.validators.base import RequestValidator

SCREENING_MESSAGES = {
    "date.required": "A date is required for the screening.",
    "date.date": "The date must be a valid date.",
    "available_seats.required": "Please provide the maximum seating number for the movie.",
    "available_seats.integer": "The available seats must be a number.",
    "available_seats.max": "The available seats must not exceed 50.",
    "available_seats.min": "The available seats are out of range.",
    "movie_id.required": "Movie id is required.",
    "movie_id.integer": "Movie id must be a number.",
    "movie_id.min": "The movie must exist.",
    "movie_id.max": "The movie must exist.",
    "movie_id.exists": "The movie must exist.",
}

screening_create_validator = RequestValidator(
    ScreeningCreate, messages=SCREENING_MESSAGES, exists={"movie_id": Movie})
screening_update_validator = RequestValidator(
    ScreeningUpdate, messages=SCREENING_MESSAGES, exists={"movie_id": Movie}, partial=True)
