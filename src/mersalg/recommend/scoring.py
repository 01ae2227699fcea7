"""Upgrade score and validity gate for one candidate against a reference."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from ..config.scoring_constants import (
    CPU_AVOID_MESSAGE, CPU_AVOID_PENALTY, CPU_BANDS,
    CPU_DECENT_REFERENCE_TIER, CPU_DELTA_POINTS, CPU_DELTA_REASON, CPU_MAX_TIER_DROP,
    GPU_CONTEXT_CANDIDATE_MIN, GPU_CONTEXT_REFERENCE_MIN, GPU_DELTA_POINTS, GPU_DELTA_REASON,
    HIGH_MARGIN_BONUS, HIGH_MARGIN_REASON,
    PRICE_CEILING_FACTOR, PRICE_PROXIMITY_BANDS,
    RAM_BANDS, RAM_DELTA_POINTS, RAM_LOW_MESSAGE, RAM_LOW_PENALTY,
    STORAGE_BANDS, STORAGE_DELTA_POINTS, STORAGE_SMALL_GB, STORAGE_SMALL_MESSAGE,
    STORAGE_SMALL_PENALTY,
    WARNING_PREFIX,
)
from ..config.rules import CPU_TIER_AVOID
from ..processing.specs import ExtractedSpecs


@dataclass(frozen=True)
class UpgradeResult:
    score: float
    is_valid_upgrade: bool
    upgrade_reason: Optional[str] = None
    breakdown: Dict[str, float] = field(default_factory=dict)


def to_number(value) -> float:
    """Missing or malformed numbers count as 0 (unknown)."""
    try:
        if value is None:
            return 0.0
        f = float(value)
    except (TypeError, ValueError):
        return 0.0
    if np.isnan(f) or np.isinf(f):
        return 0.0
    return f


def price_ceiling(reference_price) -> float:
    return to_number(reference_price) * PRICE_CEILING_FACTOR


def _band_points(value: float, ref_value: float, bands, reasons: List[str]) -> float:
    for minimum, points, reason in bands:
        if value >= minimum:
            if reason and ref_value < minimum:
                reasons.append(reason)
            return points
    return 0


def _price_points(candidate_price: float, reference_price: float) -> float:
    if reference_price <= 0:
        return 0
    ratio = candidate_price / reference_price
    for i, (low, high, points) in enumerate(PRICE_PROXIMITY_BANDS):
        above_low = ratio >= low if i == 0 else ratio > low
        if above_low and ratio <= high:
            return points
    return 0


def calculate_upgrade_score(
    candidate_specs: ExtractedSpecs,
    reference_specs: ExtractedSpecs,
    is_high_margin: bool,
    candidate_price,
    reference_price,
    max_price: Optional[float] = None,
) -> UpgradeResult:
    """
    Additive score (RAM > CPU > storage > GPU, plus margin and price
    proximity) and the hard validity gate.

    ``max_price`` overrides the default ceiling of 1.5x the reference
    price. Missing spec values count as unknown: they neither earn
    bonuses nor trigger penalties or regressions.
    """
    cand_ram, ref_ram = to_number(candidate_specs.ram_gb), to_number(reference_specs.ram_gb)
    cand_cpu, ref_cpu = to_number(candidate_specs.cpu_tier), to_number(reference_specs.cpu_tier)
    cand_sto, ref_sto = to_number(candidate_specs.storage_gb), to_number(reference_specs.storage_gb)
    cand_gpu, ref_gpu = to_number(candidate_specs.gpu_tier), to_number(reference_specs.gpu_tier)
    cand_price, ref_price = to_number(candidate_price), to_number(reference_price)

    ram_diff = cand_ram - ref_ram
    cpu_diff = cand_cpu - ref_cpu
    sto_diff = cand_sto - ref_sto
    gpu_diff = cand_gpu - ref_gpu

    reasons: List[str] = []
    penalties: List[str] = []
    breakdown: Dict[str, float] = {}

    # RAM
    ram_points = _band_points(cand_ram, ref_ram, RAM_BANDS, reasons)
    if 0 < cand_ram < RAM_BANDS[-1][0]:
        ram_points -= RAM_LOW_PENALTY
        penalties.append(RAM_LOW_MESSAGE)
    if ram_diff > 0:
        ram_points += ram_diff * RAM_DELTA_POINTS
        if not any("RAM" in r for r in reasons):
            reasons.append(f"+{ram_diff:g}GB RAM")
    breakdown["ram"] = ram_points

    # CPU
    cpu_points = _band_points(cand_cpu, ref_cpu, CPU_BANDS, reasons)
    if cand_cpu == CPU_TIER_AVOID:
        cpu_points -= CPU_AVOID_PENALTY
        penalties.append(CPU_AVOID_MESSAGE)
    if cpu_diff > 0:
        cpu_points += cpu_diff * CPU_DELTA_POINTS
        if not any("CPU" in r for r in reasons):
            reasons.append(CPU_DELTA_REASON)
    breakdown["cpu"] = cpu_points

    # Storage
    sto_points = _band_points(cand_sto, ref_sto, STORAGE_BANDS, reasons)
    if 0 < cand_sto < STORAGE_SMALL_GB:
        sto_points -= STORAGE_SMALL_PENALTY
        penalties.append(STORAGE_SMALL_MESSAGE)
    if sto_diff > 0:
        sto_points += sto_diff * STORAGE_DELTA_POINTS
    breakdown["storage"] = sto_points

    # GPU counts only in a gaming context
    gpu_points = 0.0
    gaming = ref_gpu >= GPU_CONTEXT_REFERENCE_MIN or cand_gpu >= GPU_CONTEXT_CANDIDATE_MIN
    if gaming and gpu_diff > 0:
        gpu_points = gpu_diff * GPU_DELTA_POINTS
        reasons.append(GPU_DELTA_REASON)
    breakdown["gpu"] = gpu_points

    margin_points = 0
    if is_high_margin:
        margin_points = HIGH_MARGIN_BONUS
        reasons.append(HIGH_MARGIN_REASON)
    breakdown["margin"] = margin_points

    breakdown["price"] = _price_points(cand_price, ref_price)

    score = float(sum(breakdown.values()))

    # Validity gate
    ceiling = max_price if max_price is not None else ref_price * PRICE_CEILING_FACTOR
    ram_downgrade = ref_ram > 0 and cand_ram > 0 and ram_diff < 0
    bad_cpu_downgrade = cand_cpu == CPU_TIER_AVOID and ref_cpu >= CPU_DECENT_REFERENCE_TIER
    major_cpu_downgrade = ref_cpu > 0 and cand_cpu > 0 and cpu_diff < -CPU_MAX_TIER_DROP
    any_upgrade = ram_diff > 0 or cpu_diff > 0 or sto_diff > 0 or gpu_diff > 0

    is_valid = (
        not ram_downgrade
        and not bad_cpu_downgrade
        and not major_cpu_downgrade
        and cand_price <= ceiling
        and (any_upgrade or bool(is_high_margin))
    )

    shown = list(reasons)
    if penalties:
        shown.append(WARNING_PREFIX + ", ".join(penalties))

    return UpgradeResult(
        score=score,
        is_valid_upgrade=is_valid,
        upgrade_reason=", ".join(shown) if shown else None,
        breakdown=breakdown,
    )
