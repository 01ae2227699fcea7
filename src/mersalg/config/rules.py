"""
Pattern and tier tables for spec extraction.

Every table is ordered: the first matching entry wins, so more specific
entries must stay above the generic ones.
"""

import re

_I = re.IGNORECASE

# ── CPU extraction (most specific first) ─────────────────────────────
CPU_PATTERNS = [
    re.compile(r"Apple\s+M[1-4](?:\s*(?:Pro|Max|Ultra))?\b", _I),
    re.compile(r"(?:Qualcomm\s+)?Snapdragon\s+X(?:\s*(?:Elite|Plus))?(?:\s+X1[EP]-\d{2}-\d{3})?", _I),
    re.compile(r"Intel\s+Core\s+Ultra\s+[3579](?:\s*-?\s*\d{3}[A-Z]*)?", _I),
    re.compile(r"Intel\s+Core\s+[3579]\s+\d{3}[A-Z]*", _I),
    re.compile(r"Intel\s+Core\s+i[3579](?:[\s-]?\d{4,5}[A-Z]*)?", _I),
    re.compile(r"AMD\s+Ryzen\s+AI\s+[3579](?:\s+(?:HX\s+|PRO\s+)?\d{3}[A-Z]*)?", _I),
    re.compile(r"AMD\s+Ryzen\s+[3579]\s*(?:PRO\s+)?\d{4}[A-Z]*", _I),
    re.compile(r"Intel\s+(?:Celeron|Pentium(?:\s+Silver|\s+Gold)?|Processor\s+N\d{2,4}|N\d{2,4})(?:\s+[A-Z]?\d{3,4}[A-Z]*)?", _I),
    re.compile(r"AMD\s+(?:Athlon(?:\s+(?:Silver|Gold))?|A\d{1,2})(?:\s+\d{4}[A-Z]*)?", _I),
    re.compile(r"Intel\s+Core\s+[3579]\b", _I),
    re.compile(r"AMD\s+Ryzen\s+[3579]\b", _I),
]

# Combined "(CPU/RAM/STORAGE)" notation, e.g. "(i5/16/512 GB)" or "(R7/16GB/1TB)"
COMBINED_NOTATION = re.compile(
    r"\(\s*([^/()]{1,20}?)\s*/\s*(\d{1,3})\s*(?:GB)?\s*/\s*(\d{1,4})\s*(GB|TB)?\s*\)",
    _I,
)

CPU_SHORTHAND = [
    (re.compile(r"^i([3579])$", _I), "Intel Core i{0}"),
    (re.compile(r"^R([3579])$", _I), "AMD Ryzen {0}"),
    (re.compile(r"^U([3579])$", _I), "Intel Core Ultra {0}"),
    (re.compile(r"^(?:Core\s*)?Ultra\s*([3579])$", _I), "Intel Core Ultra {0}"),
    (re.compile(r"^Core\s*([3579])$", _I), "Intel Core {0}"),
    (re.compile(r"^M([1-4])$", _I), "Apple M{0}"),
]

# ── CPU tier ladder (10 = workstation, 1 = avoid, 0 = unknown) ───────
CPU_TIER_RULES = [
    # Avoid
    (re.compile(r"celeron|pentium|athlon|amd\s+a\d|intel\s+(?:processor\s+)?n\d{2,4}", _I), 1),
    # Workstation / flagship
    (re.compile(r"apple\s+m[34]\s*(?:max|ultra)", _I), 10),
    (re.compile(r"core\s+ultra\s+9", _I), 10),
    (re.compile(r"i9[\s-]?1[45]\d{3}hx", _I), 10),
    (re.compile(r"ryzen\s+9\s*.*\d{4}hx", _I), 10),
    (re.compile(r"snapdragon\s+x\s*elite", _I), 10),
    (re.compile(r"ryzen\s+ai\s+9\s+(?:hx\s+)?3\d{2}", _I), 10),
    # High end
    (re.compile(r"apple\s+m[34]\s*pro", _I), 9),
    (re.compile(r"apple\s+m4(?!\s*(?:pro|max|ultra))", _I), 8),
    (re.compile(r"apple\s+m[12]\s*(?:pro|max|ultra)", _I), 8),
    (re.compile(r"core\s+ultra\s+7", _I), 8),
    (re.compile(r"core\s+7\b", _I), 8),
    (re.compile(r"i7[\s-]?(?:13|14)\d{3}h", _I), 8),
    (re.compile(r"ryzen\s+7\s*.*\d{4}h[sx]?", _I), 8),
    (re.compile(r"ryzen\s+ai\s+9", _I), 8),
    (re.compile(r"snapdragon\s+x\s*plus", _I), 7),
    (re.compile(r"ryzen\s+ai\s+7", _I), 7),
    # Sweet spot
    (re.compile(r"apple\s+m[123](?!\s*(?:pro|max|ultra))", _I), 6),
    (re.compile(r"core\s+ultra\s+5", _I), 6),
    (re.compile(r"core\s+5\b", _I), 6),
    (re.compile(r"i5[\s-]?(?:12|13|14)\d{2,3}[hp]", _I), 6),
    (re.compile(r"ryzen\s+5\s*.*\d{4}h[sx]?", _I), 6),
    (re.compile(r"ryzen\s+7\s*.*\d{4}u", _I), 6),
    # Budget / office
    (re.compile(r"i3[\s-]?(?:12|13|14)\d{2,3}", _I), 4),
    (re.compile(r"core\s+3\b", _I), 4),
    (re.compile(r"ryzen\s+3", _I), 4),
    (re.compile(r"ryzen\s+5\s*.*\d{4}u", _I), 4),
    (re.compile(r"i5.*u", _I), 4),
]

# Family-only fallback when no generation/suffix rule matched
CPU_FALLBACK_RULES = [
    (re.compile(r"i9", _I), 8),
    (re.compile(r"i7", _I), 6),
    (re.compile(r"i5", _I), 5),
    (re.compile(r"i3", _I), 4),
    (re.compile(r"ryzen\s+9", _I), 8),
    (re.compile(r"ryzen\s+7", _I), 6),
    (re.compile(r"ryzen\s+5", _I), 5),
]

CPU_TIER_UNKNOWN = 0
CPU_TIER_AVOID = 1

# ── GPU extraction ───────────────────────────────────────────────────
GPU_PATTERNS = [
    re.compile(r"(?:(?:NVIDIA\s+)?GeForce\s+)?RTX\s*\d{4}(?:\s*Ti)?(?:\s*Super)?", _I),
    re.compile(r"(?:(?:NVIDIA\s+)?GeForce\s+)?GTX\s*\d{4}(?:\s*Ti)?", _I),
    re.compile(r"(?:AMD\s+)?Radeon\s+RX\s*\d{4}[A-Z]*", _I),
    re.compile(r"Intel\s+(?:Iris\s+Xe(?:\s+Graphics)?|Arc\s+(?:Graphics|[A-Z]?\d{3,4}M?)|UHD\s+Graphics)", _I),
    re.compile(r"(?:AMD\s+)?Radeon\s+Graphics", _I),
]

GPU_TIER_RULES = [
    (re.compile(r"rtx\s*50\d{2}", _I), 7),
    (re.compile(r"rtx\s*40\d{2}", _I), 7),
    (re.compile(r"rtx\s*30\d{2}", _I), 5),
    (re.compile(r"rtx\s*20\d{2}", _I), 3),
    (re.compile(r"gtx", _I), 3),
    (re.compile(r"intel\s+arc\s+a\d{3}", _I), 4),
    (re.compile(r"radeon\s+rx\s*6\d{2}0", _I), 4),
    (re.compile(r"intel\s+(?:iris|uhd|arc)|radeon\s+graphics", _I), 1),
]

GPU_TIER_UNKNOWN = 0

# ── RAM / storage ────────────────────────────────────────────────────
RAM_PATTERNS = [
    re.compile(r"(?<![\d.])(\d{1,3})\s*GB\s*(?:LPDDR[45]X?|DDR[45]|RAM)", _I),
    re.compile(r"(?:^|[/\s])(\d{1,2})\s*GB(?=[/\s]|$)", _I),
]
RAM_MIN_GB = 4
RAM_MAX_GB = 64

STORAGE_TB_PATTERN = re.compile(r"(?<![\d.,])(\d+(?:[.,]\d+)?)\s*TB\b\s*(?:SSD|NVMe|HDD)?", _I)
STORAGE_GB_PATTERN = re.compile(
    r"(?<![\d.,])(\d{3,4})\s*GB\b(?!\s*(?:LPDDR|DDR|RAM|GDDR|VRAM))\s*(?:SSD|NVMe|HDD)?",
    _I,
)
STORAGE_MIN_GB = 64

# ── Screen ───────────────────────────────────────────────────────────
SCREEN_WITH_UNIT = re.compile(
    r"(?<![\w.,])(\d{1,2}(?:[.,]\d)?)\s*(?:\"|″|”|''|-?\s*inch\b|-?\s*tommer\b)",
    _I,
)
SCREEN_BARE = re.compile(
    r"(?<![\w.,/()-])(\d{1,2}(?:[.,]\d)?)(?![\w/%]|[.,]\d|\s*(?:GB|TB|Hz|W\b|x\s*\d|×))",
    _I,
)
SCREEN_BARE_BLOCKED_PREFIXES = re.compile(
    r"\b(?:windows|win|gen|generation|bluetooth|wi-?fi|thunderbolt|usb|office|"
    r"android|ios|core|ryzen|ultra|series|serie|ai|hx|x)\s*$",
    _I,
)
SCREEN_MIN_INCH = 10.0
SCREEN_MAX_INCH = 18.0

# ── Descriptive extras (display only) ────────────────────────────────
SCREEN_TYPE_PATTERN = re.compile(
    r"\b(OLED|IPS|TN|VA|Full\s*HD|FHD|QHD|4K|UHD|Retina|AMOLED|Mini-?LED)\b", _I
)
RESOLUTION_PATTERN = re.compile(r"(\d{3,4})\s*[x×]\s*(\d{3,4})")
GPU_VRAM_PATTERN = re.compile(r"(?:RTX|GTX|GeForce|Radeon\s+RX)[^\n/,]*?(\d{1,2})\s*GB", _I)

OS_PATTERNS = [
    re.compile(r"Windows\s+1[01](?:\s+(?:Home|Pro|S))?", _I),
    re.compile(r"macOS(?:\s+[A-Z][a-z]+)?", _I),
    re.compile(r"Chrome\s*OS", _I),
    re.compile(r"Linux", _I),
]

FEATURE_PATTERNS = [
    (re.compile(r"USB-C|USB\s*Type-C", _I), "USB-C"),
    (re.compile(r"Thunderbolt\s*\d?", _I), "Thunderbolt"),
    (re.compile(r"HDMI", _I), "HDMI"),
    (re.compile(r"Touchskærm|Touch\s*screen|Touchdisplay", _I), "Touchskærm"),
    (re.compile(r"Fingeraftryk|Fingerprint", _I), "Fingeraftryk"),
    (re.compile(r"Baggrundsbelyst|Backlit\s*keyboard", _I), "Baggrundsbelyst tastatur"),
    (re.compile(r"Wi-?Fi\s*6E?", _I), "WiFi 6"),
    (re.compile(r"Bluetooth\s*\d+(?:\.\d+)?", _I), "Bluetooth"),
    (re.compile(r"Webcam|Kamera", _I), "Webcam"),
    (re.compile(r"Copilot\+?\s*PC", _I), "Copilot+ PC"),
    (re.compile(r"2-i-1|2-in-1|Convertible", _I), "2-i-1"),
    (re.compile(r"NVMe|PCIe\s*(?:Gen\s*)?\d", _I), "NVMe SSD"),
]

TRADEMARK_GLYPHS = re.compile("[™®]")

# ── Margin ───────────────────────────────────────────────────────────
HIGH_MARGIN_BRANDS = {"cepter": "Cepter brand"}
PRICE_ENDING_REASON = "Pris ender på {ending}"
