import argparse
import logging
import sys

from sensorweb.core.config import settings
from sensorweb.db.session import SessionLocal
from sensorweb.services.page_links import build_page_links
from sensorweb.services.series_service import SeriesService
from sensorweb.utils.exceptions import DataAccessError
from sensorweb.utils.pagination import OffsetBasedPagination

logger = logging.getLogger(__name__)


def _links(args: argparse.Namespace) -> int:
    pagination = OffsetBasedPagination.create(args.offset, args.limit)
    print(f"self: {pagination}")
    for rel, link in build_page_links(pagination, args.elements).items():
        print(f"{rel.value}: {link}")
    return 0


def _series(args: argparse.Namespace) -> int:
    pagination = OffsetBasedPagination.create(args.offset, args.limit)
    db = SessionLocal()
    try:
        page = SeriesService(db).list_series(pagination, search=args.search)
    except DataAccessError as e:
        logger.error(f"Series page unavailable. {pagination} search={args.search!r}")
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(page.model_dump_json(indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sensorweb")
    sub = ap.add_subparsers(dest="command", required=True)

    links = sub.add_parser("links", help="Print paging links for a result set")
    links.add_argument("--offset", type=int, default=0, help="Offset of the current page")
    links.add_argument("--limit", type=int, default=0, help="Page size (<= 0 uses the default)")
    links.add_argument("--elements", type=int, required=True, help="Total number of elements")
    links.set_defaults(func=_links)

    series = sub.add_parser("series", help="Print one page of series from the database")
    series.add_argument("--offset", type=int, default=0, help="Offset of the page")
    series.add_argument("--limit", type=int, default=0, help="Page size (<= 0 uses the default)")
    series.add_argument("--search", default=None, help="Match feature, procedure or offering names")
    series.set_defaults(func=_series)

    return ap


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s %(levelname)s %(name)s %(message)s")
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
