import sys
from typing import Any, Optional

_DEFAULT_ERRORS = "backslashreplace"


def format_price(price: Optional[float]) -> str:
    """Danish kroner without decimals, e.g. 12998 -> '12.998 kr.'."""
    if price is None:
        return "-"
    try:
        value = int(round(float(price)))
    except (TypeError, ValueError):
        return "-"
    sign = "-" if value < 0 else ""
    return f"{sign}{abs(value):,} kr.".replace(",", ".")


def format_signed_price(diff: Optional[float]) -> str:
    if diff is None:
        return "-"
    if diff > 0:
        return "+" + format_price(diff)
    return format_price(diff)


def safe_print(*args: Any, sep: str = " ", end: str = "\n", file=None) -> None:
    """print() that never dies on characters the console cannot encode."""
    stream = file or sys.stdout
    text = sep.join(str(a) for a in args) + end
    try:
        stream.write(text)
    except UnicodeEncodeError:
        encoding = getattr(stream, "encoding", None) or "utf-8"
        stream.write(text.encode(encoding, errors=_DEFAULT_ERRORS).decode(encoding, errors=_DEFAULT_ERRORS))
