"""
Date helpers for resume entries
"""

from datetime import datetime

# Fixed English abbreviations so output does not depend on the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

PRESENT = "Present"


def format_month(value: str) -> str:
    """
    Render a YYYY-MM string as "Mon YYYY"

    Blank input gives "", anything that is not YYYY-MM is returned unchanged.
    """
    value = (value or "").strip()
    if not value:
        return ""
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except ValueError:
        return value
    return f"{MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.year}"


def format_date_range(start: str, end: str, is_current: bool = False) -> str:
    """Join start and end with " - "; current roles end with "Present" """
    start_text = format_month(start)
    end_text = PRESENT if is_current else format_month(end)
    return " - ".join(part for part in (start_text, end_text) if part)
