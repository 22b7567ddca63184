"""
Date and currency helpers shared by intake and reconciliation.
"""
import re
from datetime import datetime, timezone

from housing_portal.config import CURRENCY_PREFIX


def now_timestamp() -> str:
    """Current UTC time as an ISO-8601 timestamp with millisecond precision."""
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def today_iso() -> str:
    """Current UTC date as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()


def parse_amount(value) -> int:
    """Integer amount from a currency string, ignoring every non-digit."""
    if value is None:
        return 0
    digits = re.sub(r"[^0-9]", "", str(value))
    return int(digits) if digits else 0


def format_amount(amount: int) -> str:
    return f"{CURRENCY_PREFIX} {amount:,}"


def derive_remaining(allocated, utilized) -> str:
    """Remaining funds as allocated minus utilized, currency formatted."""
    return format_amount(parse_amount(allocated) - parse_amount(utilized))
