from __future__ import annotations

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from goatfarm.infrastructure.db.base import Base


class GoatDiseaseORM(Base):
    __tablename__ = "goat_diseases"

    goat_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("goats.id", ondelete="CASCADE"), primary_key=True
    )
    disease_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("diseases.id", ondelete="CASCADE"), primary_key=True
    )
