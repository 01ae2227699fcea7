"""
Upgrade scoring constants.

Priority order of the buying guide: RAM > CPU > Storage > GPU.
The high-margin bonus is the seller's lever on top of that.
"""

# ── RAM ──────────────────────────────────────────────────────────────
# (gb_min, points, reason shown when the reference is below gb_min)
RAM_BANDS = [
    (32, 30, "32GB RAM"),
    (16, 20, "16GB RAM (standard)"),
    (8, 5, None),
]
RAM_LOW_PENALTY = 20            # 0 < RAM < 8GB
RAM_LOW_MESSAGE = "Under 8GB RAM"
RAM_DELTA_POINTS = 3            # per extra GB over the reference

# ── CPU ──────────────────────────────────────────────────────────────
CPU_BANDS = [
    (8, 15, "Høj-ydeevne CPU (Tier A/S)"),
    (6, 10, "God CPU (Sweet Spot)"),
]
CPU_AVOID_PENALTY = 40          # tier 1 (Celeron/Pentium/...)
CPU_AVOID_MESSAGE = "Undgå: Celeron/Pentium CPU"
CPU_DELTA_POINTS = 8            # per tier over the reference
CPU_DELTA_REASON = "Bedre CPU"

# ── Storage ──────────────────────────────────────────────────────────
STORAGE_BANDS = [
    (1024, 10, "1TB+ lagerplads"),
    (512, 5, "512GB+ SSD"),
]
STORAGE_SMALL_GB = 256
STORAGE_SMALL_PENALTY = 5
STORAGE_SMALL_MESSAGE = "Lille lagerplads"
STORAGE_DELTA_POINTS = 0.02     # per extra GB over the reference

# ── GPU (gaming context only) ────────────────────────────────────────
GPU_CONTEXT_REFERENCE_MIN = 3   # reference already has a dedicated GPU
GPU_CONTEXT_CANDIDATE_MIN = 5   # or the candidate is a gaming machine
GPU_DELTA_POINTS = 3
GPU_DELTA_REASON = "Bedre grafikkort"

# ── Margin ───────────────────────────────────────────────────────────
HIGH_MARGIN_BONUS = 25
HIGH_MARGIN_REASON = "Høj avance"

# ── Price ────────────────────────────────────────────────────────────
# (ratio_low, ratio_high, points); ratio = candidate / reference,
# the first band is closed on both ends, later bands are open at the bottom
PRICE_PROXIMITY_BANDS = [
    (0.9, 1.2, 10),
    (1.2, 1.4, 5),
]
PRICE_CEILING_FACTOR = 1.5      # candidate <= reference * 1.5

# ── Validity ─────────────────────────────────────────────────────────
CPU_DECENT_REFERENCE_TIER = 4   # no avoid-tier CPU offered against tier >= 4
CPU_MAX_TIER_DROP = 2           # larger drops are a regression

WARNING_PREFIX = "Advarsel: "

# ── Selection ────────────────────────────────────────────────────────
MAX_ALTERNATIVES = 8
