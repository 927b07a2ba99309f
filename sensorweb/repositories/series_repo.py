import logging

from sqlalchemy import Select, false, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sensorweb.db.models.series import Series
from sensorweb.utils.exceptions import DataAccessError
from sensorweb.utils.pagination import Pagination

logger = logging.getLogger(__name__)


def _visible(stmt: Select) -> Select:
    return stmt.where(
        Series.published.is_(True),
        or_(Series.deleted.is_(None), Series.deleted == false()),
        Series.first_value_at.is_not(None),
        Series.last_value_at.is_not(None),
    )


def _matching(stmt: Select, search: str | None) -> Select:
    if not search:
        return stmt
    # search text is literal: LIKE wildcards in it are escaped
    escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    pattern = f"%{escaped}%"
    return stmt.where(
        or_(
            Series.feature.ilike(pattern, escape="\\"),
            Series.procedure.ilike(pattern, escape="\\"),
            Series.offering.ilike(pattern, escape="\\"),
        )
    )


class SeriesRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def get(self, series_id: int) -> Series | None:
        stmt = _visible(select(Series).where(Series.id == series_id))
        try:
            return self._db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.exception(f"Series lookup failed. series_id={series_id}")
            raise DataAccessError(f"Could not load series series_id={series_id}.") from e

    def count(self, *, search: str | None = None) -> int:
        stmt = _matching(_visible(select(func.count()).select_from(Series)), search)
        try:
            return int(self._db.execute(stmt).scalar_one())
        except SQLAlchemyError as e:
            logger.exception(f"Series count failed. search={search!r}")
            raise DataAccessError("Could not count series.") from e

    def list(self, pagination: Pagination, *, search: str | None = None) -> list[Series]:
        stmt: Select = (
            _matching(_visible(select(Series)), search)
            .order_by(Series.id.asc())
            .limit(pagination.limit)
            .offset(pagination.offset)
        )
        try:
            return list(self._db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            logger.exception(f"Series query failed. {pagination} search={search!r}")
            raise DataAccessError(f"Could not list series for {pagination}.") from e
