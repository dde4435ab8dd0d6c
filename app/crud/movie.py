from app.core.exceptions import MovieNotFoundError
from app.crud.base import CRUDBase
from app.models.movie import Movie


class CRUDMovie(CRUDBase[Movie]):
    model = Movie
    not_found_error = MovieNotFoundError


crud_movie = CRUDMovie()
