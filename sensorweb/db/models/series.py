from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, Integer, String, func, true
from sqlalchemy.orm import Mapped, mapped_column

from sensorweb.db.base import Base


class Series(Base):
    __tablename__ = "series"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    label: Mapped[str | None] = mapped_column(String(255), nullable=True)
    feature: Mapped[str] = mapped_column(String(255), nullable=False)
    procedure: Mapped[str] = mapped_column(String(255), nullable=False)
    offering: Mapped[str] = mapped_column(String(255), nullable=False)
    phenomenon: Mapped[str] = mapped_column(String(255), nullable=False)

    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())
    deleted: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)

    first_value_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_value_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )


Index("ix_series_published", Series.published)
Index("ix_series_feature", Series.feature)
