from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.db.base import Base, BigIntPK
from app.models import SoftDeleteMixin, TimestampMixin


class Movie(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "movies"
    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    age_limit: Mapped[int] = mapped_column(Integer, nullable=False)
    language: Mapped[str] = mapped_column(String(25), nullable=False)
    cover_art: Mapped[str] = mapped_column(String(255), nullable=False)
    # soft deleting a movie leaves its screenings in place
    screenings: Mapped[list["Screening"]] = relationship(back_populates="movie")
