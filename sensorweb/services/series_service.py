import logging

from sqlalchemy.orm import Session

from sensorweb.db.models.series import Series
from sensorweb.repositories.series_repo import SeriesRepository
from sensorweb.schemas.series import PageLinks, SeriesPage, SeriesRead
from sensorweb.services.page_links import build_page_links
from sensorweb.utils.exceptions import NotFoundError
from sensorweb.utils.pagination import Pagination

logger = logging.getLogger(__name__)


class SeriesService:
    def __init__(self, db: Session) -> None:
        self._repo = SeriesRepository(db)

    def get_series(self, series_id: int) -> Series:
        series = self._repo.get(series_id)
        if series is None:
            raise NotFoundError(f"Series series_id={series_id} not found.")
        return series

    def list_series(self, pagination: Pagination, *, search: str | None = None) -> SeriesPage:
        total = self._repo.count(search=search)
        items = self._repo.list(pagination, search=search)
        links = build_page_links(pagination, total)
        logger.info(f"Series page loaded. {pagination} total={total} items={len(items)} search={search!r}")
        return SeriesPage(
            items=[SeriesRead.model_validate(x) for x in items],
            offset=pagination.offset,
            limit=pagination.limit,
            start=pagination.start,
            end=pagination.end,
            total=total,
            links=PageLinks(**{rel.value: link for rel, link in links.items()}),
        )
