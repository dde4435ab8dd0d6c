from sqlalchemy.orm import selectinload
from sqlalchemy.sql import Select

from app.core.exceptions import ScreeningNotFoundError
from app.crud.base import CRUDBase
from app.models.screening import Screening


class CRUDScreening(CRUDBase[Screening]):
    model = Screening
    not_found_error = ScreeningNotFoundError

    def _select(self) -> Select:
        # the movie is attached even if it was soft deleted after scheduling
        return super()._select().options(selectinload(Screening.movie))


crud_screening = CRUDScreening()
