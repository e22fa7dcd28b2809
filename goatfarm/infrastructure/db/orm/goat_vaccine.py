from __future__ import annotations

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from goatfarm.infrastructure.db.base import Base


class GoatVaccineORM(Base):
    """Many-to-many link between goats and vaccines.

    Both foreign keys cascade on delete, so removing either parent removes the
    link in the same statement.
    """

    __tablename__ = "goat_vaccines"

    goat_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("goats.id", ondelete="CASCADE"), primary_key=True
    )
    vaccine_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("vaccines.id", ondelete="CASCADE"), primary_key=True
    )
