#file: backend/utils.py

import math
from typing import Optional, Sequence

def series_mean(values: Sequence[Optional[float]]) -> float:
    """Arithmetic mean of the readings present in a series, nan when there are none."""
    readings = [value for value in values if value is not None]
    if not readings:
        return math.nan
    return sum(readings) / len(readings)

def percent_change(current: Optional[float], reference: Optional[float]) -> Optional[float]:
    """Percent change from reference to current, rounded to one decimal."""
    if current is None or reference is None or math.isnan(reference) or reference == 0:
        return None
    return round((current - reference) / reference * 100, 1)
