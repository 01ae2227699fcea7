import argparse
from typing import List, Optional

from ..ingestion.catalog import CatalogBlocked, CatalogError, CatalogTimeout, PowerCatalog
from ..ingestion.orchestrator import run_sync
from ..processing.clean import clean_sales_text
from ..processing.specs import extract_specs
from ..recommend.search import compare_products, search_upgrades
from ..storage.repository import ProductRepository
from ..utils.console import safe_print
from ..utils.logging import get_logger, set_console_level
from .display import display_json, display_product, display_search_result, display_specs

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mersalg", description="Mersalgsassistent til bærbare")
    parser.add_argument("--verbose", "-v", action="store_true", help="Vis debug-log")
    parser.add_argument("--store", default=None, help="Sti til produkt-CSV")
    sub = parser.add_subparsers(dest="command", required=True)

    p_sync = sub.add_parser("sync", help="Hent alle bærbare fra kataloget")
    p_sync.add_argument("--keep", action="store_true", help="Ryd ikke lageret først")
    p_sync.add_argument("--max-pages", type=int, default=None)

    p_search = sub.add_parser("search", help="Find opgraderinger til et produkt")
    p_search.add_argument("query")
    p_search.add_argument("--db", action="store_true", help="Søg i lokalt lager først")
    p_search.add_argument("--json", action="store_true", help="Output som JSON")
    p_search.add_argument("--breakdown", action="store_true", help="Vis pointfordeling")

    p_compare = sub.add_parser("compare", help="Sammenlign produkter ud fra id")
    p_compare.add_argument("ids", nargs="+")
    p_compare.add_argument("--json", action="store_true")

    sub.add_parser("status", help="Vis status for lageret")

    p_extract = sub.add_parser("extract", help="Udtræk specifikationer fra en produkttitel")
    p_extract.add_argument("name")
    p_extract.add_argument("--sales", default=None, help="Salgstekst (kan være HTML)")
    p_extract.add_argument("--json", action="store_true")

    return parser


def _cmd_sync(args, repo: ProductRepository) -> int:
    report = run_sync(PowerCatalog(), repo, clear_first=not args.keep, max_pages=args.max_pages)
    safe_print(f"Synkroniseret {report.synced}/{report.total} produkter "
               f"({report.high_margin} med høj avance, {report.pages} sider).")
    if report.warnings:
        safe_print(f"{len(report.warnings)} advarsler, se loggen.")
        for w in report.warnings:
            logger.debug("sync warning: %s", w)
    return 0


def _cmd_search(args, repo: ProductRepository) -> int:
    result = search_upgrades(args.query, repo, use_database=args.db)
    if args.json:
        display_json(result.to_dict())
    else:
        display_search_result(result, show_breakdown=args.breakdown)
    return 0


def _cmd_compare(args, repo: ProductRepository) -> int:
    products = compare_products(args.ids, repo)
    if args.json:
        display_json({"products": [p.to_dict() for p in products]})
        return 0
    if not products:
        safe_print("Ingen af produkterne blev fundet.")
        return 0
    for p in products:
        display_product(p, f"[{p.id}]")
        safe_print("")
    return 0


def _cmd_status(args, repo: ProductRepository) -> int:
    safe_print(f"Lager: {repo.path}")
    safe_print(f"Produkter: {repo.count()}")
    safe_print(f"Høj avance: {repo.high_margin_count()}")
    return 0


def _cmd_extract(args, repo: ProductRepository) -> int:
    specs = extract_specs(args.name, clean_sales_text(args.sales))
    if args.json:
        display_json(specs.to_dict())
    else:
        display_specs(specs)
    return 0


COMMANDS = {
    "sync": _cmd_sync,
    "search": _cmd_search,
    "compare": _cmd_compare,
    "status": _cmd_status,
    "extract": _cmd_extract,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_console_level("DEBUG")

    repo = ProductRepository(args.store) if args.store else ProductRepository()

    try:
        return COMMANDS[args.command](args, repo)
    except CatalogTimeout:
        safe_print("Timeout ved forbindelse til Power.dk")
    except CatalogBlocked:
        safe_print("Adgang til Power.dk API er midlertidigt blokeret. Prøv igen om et øjeblik.")
    except CatalogError as e:
        logger.error("Catalog error: %s", e)
        safe_print("Der opstod en fejl ved søgning. Prøv igen.")
    except ValueError as e:
        safe_print(f"Fejl: {e}")
    return 1
