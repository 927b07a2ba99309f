from datetime import datetime

from pydantic import BaseModel, ConfigDict


class SeriesRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    label: str | None
    feature: str
    procedure: str
    offering: str
    phenomenon: str
    first_value_at: datetime | None
    last_value_at: datetime | None


class PageLinks(BaseModel):
    first: str | None = None
    previous: str | None = None
    next: str | None = None
    last: str | None = None


class SeriesPage(BaseModel):
    items: list[SeriesRead]
    offset: int
    limit: int
    start: int
    end: int
    total: int
    links: PageLinks
