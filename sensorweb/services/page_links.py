from sensorweb.core.enums import PageRel
from sensorweb.utils.pagination import Pagination


def build_page_links(pagination: Pagination, elements: int) -> dict[PageRel, str]:
    """Map each navigable relation to its ``offset=..&limit=..`` query string.

    Relations without a page in that direction are left out.
    """
    candidates = {
        PageRel.FIRST: pagination.first(elements),
        PageRel.PREVIOUS: pagination.previous(elements),
        PageRel.NEXT: pagination.next(elements),
        PageRel.LAST: pagination.last(elements),
    }
    return {rel: str(page) for rel, page in candidates.items() if page is not None}
