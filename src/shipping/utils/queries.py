"""Full reads over protean querysets.

A protean ``QuerySet`` returns at most 100 records unless told otherwise.
``fetch_all`` walks the result in pages ordered by a stable key so listings
and histories are never silently truncated.
"""

PAGE_SIZE = 100


def fetch_all(query, order_by: str, page_size: int = PAGE_SIZE) -> list:
    """Every record matched by ``query``, read page by page in ``order_by`` order."""
    query = query.order_by(order_by)
    records = []
    offset = 0
    while True:
        page = query.offset(offset).limit(page_size).all().items
        records.extend(page)
        if len(page) < page_size:
            return records
        offset += page_size
