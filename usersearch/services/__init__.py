"""
Search service business logic.
"""

import logging
from enum import Enum
from functools import cmp_to_key
from typing import List, Sequence
from usersearch.core.config import settings
from usersearch.exceptions import BadOrderFieldError
from usersearch.schemas import OrderBy, User, UserRecord

logger = logging.getLogger(__name__)


# ============================================================
# Sortable fields
# ============================================================

def _compare(lhs, rhs) -> int:
    return (lhs > rhs) - (lhs < rhs)


class OrderField(str, Enum):
    """Closed set of fields a search can be ordered by."""

    ID = "Id"
    NAME = "Name"
    AGE = "Age"

    @classmethod
    def parse(cls, raw: str) -> "OrderField":
        """Resolve the wire value; empty means Name, anything unknown is rejected."""
        if raw == "":
            return cls.NAME
        try:
            return cls(raw)
        except ValueError:
            raise BadOrderFieldError(raw)

    def compare(self, lhs: UserRecord, rhs: UserRecord) -> int:
        """Three-way comparison of two records on this field."""
        if self is OrderField.ID:
            return _compare(lhs.id, rhs.id)
        if self is OrderField.AGE:
            return _compare(lhs.age, rhs.age)
        return _compare(lhs.name, rhs.name)


# ============================================================
# Record query engine
# ============================================================

def matches(record: UserRecord, query: str) -> bool:
    """Case-sensitive substring match on about, first and last name."""
    if not query:
        return True
    return (
        query in record.about
        or query in record.first_name
        or query in record.last_name
    )


def search_records(
    records: Sequence[UserRecord],
    query: str = "",
    order_field: str = "",
    order_by: OrderBy = OrderBy.AS_IS,
    limit: int = 0,
    offset: int = 0,
) -> List[User]:
    """Filter, sort and slice ``records`` without touching the input sequence.

    ``limit <= 0`` means "as many as the server allows"; the limit is always
    capped at ``settings.MAX_LIMIT``. An offset past the end yields an empty
    list.
    """
    filtered = [record for record in records if matches(record, query)]

    if order_by != OrderBy.AS_IS:
        field = OrderField.parse(order_field)
        direction = int(order_by)
        # list.sort is stable, so equal keys keep dataset order
        filtered.sort(key=cmp_to_key(lambda lhs, rhs: direction * field.compare(lhs, rhs)))

    if limit <= 0 or limit > settings.MAX_LIMIT:
        limit = settings.MAX_LIMIT
    offset = max(offset, 0)

    page = filtered[offset: offset + limit]
    return [record.to_user() for record in page]


# ============================================================
# Search Service
# ============================================================

class SearchService:
    """Search over an immutable record set."""

    def __init__(self, records: Sequence[UserRecord] = ()):
        self.records = tuple(records)

    def search(
        self,
        query: str = "",
        order_field: str = "",
        order_by: OrderBy = OrderBy.AS_IS,
        limit: int = 0,
        offset: int = 0,
    ) -> List[User]:
        logger.info(
            f"Searching: query='{query}', order_field='{order_field}', "
            f"order_by={int(order_by)}, limit={limit}, offset={offset}"
        )

        results = search_records(self.records, query, order_field, order_by, limit, offset)

        logger.debug(f"Returning {len(results)} of {len(self.records)} records")
        return results
