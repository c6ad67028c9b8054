"""Read views over PVZ, receptions and products.

`PVZViews.get_full_info` assembles the nested PVZ -> receptions -> products
view. Its three reads run inside one unit of work so they observe a single
consistent snapshot; nothing is written.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from pvz_service.domain.errors import InvalidPagination
from pvz_service.domain.models import (
    PVZ,
    FullPVZInfo,
    Product,
    Reception,
    ReceptionWithProducts,
)

if TYPE_CHECKING:
    from pvz_service.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


class PVZViews:
    """Read-only queries for the PVZ listing endpoints.

    Args:
        uow: Unit of work to read through. A snapshot-isolated unit is
            preferable on backends where the default isolation level gives
            per-statement snapshots.
    """

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    def get_full_info(
        self,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> list[FullPVZInfo]:
        """Return a page of PVZ with their receptions and products.

        PVZ are ordered by registration date, newest first, and paginated
        before any date filtering. The date range applies to receptions only:
        a PVZ whose receptions are all filtered out is still listed, with none.

        Args:
            start_date: Inclusive lower bound on the reception timestamp, or None.
            end_date: Inclusive upper bound on the reception timestamp, or None.
            page: 1-based page number.
            limit: Page size.

        Raises:
            InvalidPagination: If `page` or `limit` is less than 1.
        """
        if page < 1 or limit < 1:
            raise InvalidPagination(page, limit)
        start_date, end_date = _as_utc(start_date), _as_utc(end_date)

        logger.debug(
            "Get full PVZ info: page=%d, limit=%d, start=%s, end=%s",
            page,
            limit,
            start_date,
            end_date,
        )

        def _read(uow: AbstractUnitOfWork) -> list[FullPVZInfo]:
            page_of_pvz = paginate(uow.pvz.list_all(), page, limit)
            fetched = uow.receptions.list_by_pvz_ids([p.id for p in page_of_pvz])
            surviving = filter_receptions_by_date(fetched, start_date, end_date)
            products = uow.products.list_by_reception_ids([r.id for r in surviving])
            return assemble(page_of_pvz, surviving, products)

        result = self.uow.run_atomic(_read)
        logger.info("Built full PVZ info: %d PVZ returned", len(result))
        return result

    def list_all(self) -> list[PVZ]:
        """Return every PVZ, newest registration first, without filtering."""
        with self.uow:
            return self.uow.pvz.list_all()


# --- helpers ---


def _as_utc(value: datetime | None) -> datetime | None:
    # naive bounds are taken to be UTC, like stored timestamps
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def paginate(items: Sequence[PVZ], page: int, limit: int) -> list[PVZ]:
    """Return the zero-based window ``[(page-1)*limit, (page-1)*limit + limit)``.

    An out-of-range start gives an empty page; the end is clipped to the
    number of items.
    """
    start = (page - 1) * limit
    if start >= len(items):
        return []
    return list(items[start : min(start + limit, len(items))])


def filter_receptions_by_date(
    receptions: Iterable[Reception],
    start_date: datetime | None,
    end_date: datetime | None,
) -> list[Reception]:
    """Keep receptions whose timestamp lies within the inclusive bounds given."""
    return [
        r
        for r in receptions
        if (start_date is None or r.date_time >= start_date)
        and (end_date is None or r.date_time <= end_date)
    ]


def assemble(
    pvz_page: Sequence[PVZ],
    receptions: Iterable[Reception],
    products: Iterable[Product],
) -> list[FullPVZInfo]:
    """Nest products under receptions and receptions under PVZ, keeping fetch order."""
    products_by_reception: dict[str, list[Product]] = defaultdict(list)
    for product in products:
        products_by_reception[product.reception_id].append(product)

    receptions_by_pvz: dict[str, list[ReceptionWithProducts]] = defaultdict(list)
    for reception in receptions:
        receptions_by_pvz[reception.pvz_id].append(
            ReceptionWithProducts(
                reception=reception,
                products=tuple(products_by_reception[reception.id]),
            )
        )

    return [
        FullPVZInfo(pvz=p, receptions=tuple(receptions_by_pvz[p.id])) for p in pvz_page
    ]
