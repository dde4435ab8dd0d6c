from datetime import datetime
from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.db.base import Base, BigIntPK
from app.models import SoftDeleteMixin, TimestampMixin


class Screening(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "screenings"
    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, index=True)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    available_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    movie_id: Mapped[int] = mapped_column(BigInteger, ForeignKey(
        "movies.id"), index=True, nullable=False)
    movie: Mapped["Movie"] = relationship(back_populates="screenings")
