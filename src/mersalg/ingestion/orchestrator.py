from dataclasses import dataclass, field
from typing import List, Optional

from ..config.settings import SYNC_PAGE_SIZE
from ..processing.clean import listing_to_product
from ..processing.validate import validate_product
from ..storage.repository import ProductRepository
from ..utils.logging import get_logger
from .catalog import PowerCatalog

logger = get_logger(__name__)


@dataclass
class SyncReport:
    synced: int = 0
    total: int = 0
    pages: int = 0
    high_margin: int = 0
    warnings: List[str] = field(default_factory=list)


def run_sync(
    catalog: PowerCatalog,
    repository: ProductRepository,
    page_size: int = SYNC_PAGE_SIZE,
    clear_first: bool = True,
    max_pages: Optional[int] = None,
) -> SyncReport:
    """Page through the laptop category and upsert every listing."""
    report = SyncReport()
    offset = 0

    if clear_first:
        logger.info("Starting full sync: clearing the product store")
        repository.clear()

    while max_pages is None or report.pages < max_pages:
        page = catalog.fetch_page(offset, page_size)
        report.total = page.total_count
        if not page.products:
            break

        products = [listing_to_product(raw) for raw in page.products]
        for product in products:
            for warning in validate_product(product):
                report.warnings.append(f"{product.id}: {warning}")

        repository.upsert(products)
        report.pages += 1
        report.synced += len(products)
        report.high_margin += sum(1 for p in products if p.is_high_margin)
        offset += len(products)
        logger.info("Synced batch %d (%d/%d)", report.pages, report.synced, report.total)

        if offset >= page.total_count:
            break

    logger.info(
        "Sync done: %d products, %d high margin, %d warnings",
        report.synced, report.high_margin, len(report.warnings),
    )
    return report
