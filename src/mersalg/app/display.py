"""Console rendering for search results, products and extracted specs."""

import json
from typing import List

from ..processing.specs import ExtractedSpecs
from ..recommend.engine import Product, ScoredCandidate
from ..recommend.search import SearchResult
from ..utils.console import format_price, format_signed_price, safe_print

WIDTH = 70

_SPEC_LABELS = [
    ("cpu", "CPU"),
    ("cpu_tier", "CPU tier"),
    ("gpu", "Grafik"),
    ("gpu_tier", "GPU tier"),
    ("gpu_vram_gb", "VRAM (GB)"),
    ("ram", "RAM"),
    ("storage", "Lagerplads"),
    ("screen_size", "Skærm (tommer)"),
    ("screen_type", "Skærmtype"),
    ("screen_resolution", "Opløsning"),
    ("os", "Styresystem"),
]


def spec_lines(specs: ExtractedSpecs) -> List[str]:
    lines = []
    for attr, label in _SPEC_LABELS:
        value = getattr(specs, attr)
        if value is not None:
            lines.append(f"{label:<16}{value}")
    if specs.features:
        lines.append(f"{'Features':<16}{', '.join(specs.features)}")
    return lines


def display_specs(specs: ExtractedSpecs) -> None:
    lines = spec_lines(specs)
    if not lines:
        safe_print("Ingen specifikationer fundet.")
        return
    for line in lines:
        safe_print("  " + line)


def _short_specs(specs: ExtractedSpecs) -> str:
    parts = [specs.cpu, specs.ram, specs.storage, specs.gpu]
    return " | ".join(p for p in parts if p) or "-"


def display_product(product: Product, heading: str = "") -> None:
    if heading:
        safe_print(heading)
    safe_print(f"  {product.name}")
    safe_print(f"  {product.brand} · {format_price(product.price)}"
               + ("  [HØJ AVANCE]" if product.is_high_margin else ""))
    display_specs(product.specs)


def _display_alternative(i: int, alt: ScoredCandidate) -> None:
    marker = "★ " if alt.is_top_pick else ""
    safe_print(f"\n{i}. {marker}{alt.name}")
    safe_print(f"   {format_price(alt.price)} ({format_signed_price(alt.price_difference)})"
               f"   score {alt.upgrade_score:.1f}")
    safe_print(f"   {_short_specs(alt.specs)}")
    if alt.upgrade_reason:
        safe_print(f"   {alt.upgrade_reason}")
    if alt.is_high_margin and alt.margin_reason:
        safe_print(f"   Avance: {alt.margin_reason}")


def display_search_result(result: SearchResult, show_breakdown: bool = False) -> None:
    if not result.products:
        safe_print(f"Ingen produkter på lager fundet for '{result.search_query}'.")
        return

    safe_print("=" * WIDTH)
    safe_print(f"Søgning: {result.search_query}  ({result.total_count} hits, kilde: {result.source})")
    safe_print("=" * WIDTH)
    display_product(result.reference, "Reference:")
    safe_print("-" * WIDTH)

    if not result.alternatives:
        safe_print("Ingen bedre alternativer fundet.")
        return

    safe_print(f"Alternativer ({len(result.alternatives)}):")
    for i, alt in enumerate(result.alternatives, 1):
        _display_alternative(i, alt)
        if show_breakdown and alt.score_breakdown:
            parts = ", ".join(f"{k}={v:.1f}" for k, v in alt.score_breakdown.items())
            safe_print(f"   [{parts}]")

    top = result.top_pick
    if top is not None:
        safe_print("-" * WIDTH)
        safe_print(f"Top anbefaling: {top.name} ({format_price(top.price)})")


def display_json(payload) -> None:
    safe_print(json.dumps(payload, ensure_ascii=False, indent=2))
