from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import CheckConstraint, Date, DateTime, Float, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from goatfarm.infrastructure.db.base import Base


class GoatORM(Base):
    __tablename__ = "goats"
    __table_args__ = (
        CheckConstraint("gender IN ('Male', 'Female')", name="gender"),
        {"sqlite_autoincrement": True},
    )
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    breed: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    gender: Mapped[str] = mapped_column(Text, nullable=False)
    offspring: Mapped[int | None] = mapped_column(Integer, server_default="0")
    cost: Mapped[float | None] = mapped_column(Float, nullable=True)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    current_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    diet: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_bred: Mapped[date | None] = mapped_column(Date, nullable=True)
    health_status: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
