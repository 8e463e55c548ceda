from datetime import date, timedelta
from typing import Optional, Tuple

from dateutil.relativedelta import relativedelta


# -------------------------------------------------
# ROLLING DAY WINDOWS
# -------------------------------------------------
ROLLING_DAYS = {
    "LAST_7_DAYS": 7,
    "LAST_30_DAYS": 30,
    "LAST_90_DAYS": 90,
    "LAST_180_DAYS": 180,
}


def resolve_time_window(
    preset: Optional[str],
    today: Optional[date] = None,
) -> Optional[Tuple[Optional[date], date]]:
    """
    Turn a time preset into an inclusive (start, end) date pair.

    Rules:
    - rolling windows end today and include it
    - calendar presets follow calendar months / years
    - ALL_TIME has no lower bound (start is None)
    - unknown presets resolve to None so the executor can fall back
    """
    if not preset:
        return None

    today = today or date.today()

    if preset in ROLLING_DAYS:
        return today - timedelta(days=ROLLING_DAYS[preset] - 1), today

    if preset == "THIS_MONTH":
        return today.replace(day=1), today

    if preset == "LAST_MONTH":
        first_of_this_month = today.replace(day=1)
        start = first_of_this_month - relativedelta(months=1)
        return start, first_of_this_month - timedelta(days=1)

    if preset == "THIS_YEAR":
        return today.replace(month=1, day=1), today

    if preset == "ALL_TIME":
        return None, today

    return None
