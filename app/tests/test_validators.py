import pytest
from app.core.exceptions import ValidationFailedError
from app.validators.movie import movie_create_validator, movie_update_validator
from app.validators.screening import screening_create_validator, screening_update_validator


async def test_create_accepts_unbounded_age_limit(db_session):
    movie = await movie_create_validator.validate({
        "title": "Grown Ups",
        "description": "Short",
        "age_limit": 21,
        "language": "English",
        "cover_art": "https://example.com/cover.png",
    }, db_session)
    assert movie.age_limit == 21
    assert movie.description == "Short"


async def test_update_bounds_age_limit(db_session):
    with pytest.raises(ValidationFailedError) as exc_info:
        await movie_update_validator.validate({"age_limit": -1}, db_session)
    assert exc_info.value.errors == {"age_limit": ["Age limit must be at least 0."]}
    assert exc_info.value.status_code == 422


async def test_update_with_empty_payload_sets_nothing(db_session):
    update = await movie_update_validator.validate({}, db_session)
    assert update.model_dump(exclude_unset=True) == {}


async def test_update_ignores_unknown_fields(db_session):
    update = await movie_update_validator.validate({"title": "Kept", "id": 77, "deleted_at": None}, db_session)
    assert update.model_dump(exclude_unset=True) == {"title": "Kept"}


async def test_non_object_body_is_rejected(db_session):
    with pytest.raises(ValidationFailedError) as exc_info:
        await movie_create_validator.validate(["not", "an", "object"], db_session)
    assert exc_info.value.errors == {"body": ["The request body must be an object."]}


async def test_screening_create_checks_movie_exists(db_session, seeded_test_data):
    payload = {"date": "2025-05-15 19:30:00", "available_seats": 10}
    screening = await screening_create_validator.validate(
        {**payload, "movie_id": seeded_test_data["movie_ids"][0]}, db_session)
    assert screening.movie_id == seeded_test_data["movie_ids"][0]

    with pytest.raises(ValidationFailedError) as exc_info:
        await screening_create_validator.validate({**payload, "movie_id": 424242}, db_session)
    assert exc_info.value.errors == {"movie_id": ["The movie must exist."]}


async def test_screening_existence_check_runs_alongside_other_errors(db_session):
    with pytest.raises(ValidationFailedError) as exc_info:
        await screening_create_validator.validate(
            {"date": "2025-05-15 19:30:00", "available_seats": 99, "movie_id": 424242}, db_session)
    assert exc_info.value.errors == {
        "available_seats": ["The available seats must not exceed 50."],
        "movie_id": ["The movie must exist."],
    }


async def test_screening_non_integer_movie_id_skips_existence_check(db_session):
    with pytest.raises(ValidationFailedError) as exc_info:
        await screening_update_validator.validate({"movie_id": "four"}, db_session)
    assert exc_info.value.errors == {"movie_id": ["Movie id must be a number."]}


async def test_screening_seats_have_no_lower_bound(db_session):
    update = await screening_update_validator.validate({"available_seats": -3}, db_session)
    assert update.available_seats == -3
