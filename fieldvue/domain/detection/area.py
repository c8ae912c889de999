"""Area resolution for detection candidates (square feet)."""

import math
from typing import Optional

from ..models.measurement import DetectionCandidate


def to_number(value: object) -> Optional[float]:
    """
    Parse a detector-supplied number.

    Accepts ints, floats and numeric strings. Booleans, non-numeric strings,
    NaN/inf, integers too large for a float and negative values are
    treated as absent.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (OverflowError, ValueError):
        # ints beyond float range overflow rather than becoming inf
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number


def resolve_area(candidate: DetectionCandidate) -> float:
    """
    Area a candidate contributes to its type's total.

    Explicit surface_area wins; otherwise width * height when both are
    usable; otherwise 0.0 (the candidate is still counted).
    """
    surface_area = to_number(candidate.surface_area)
    if surface_area is not None:
        return surface_area

    width = to_number(candidate.estimated_width_feet)
    height = to_number(candidate.estimated_height_feet)
    if width is not None and height is not None:
        area = width * height
        if math.isfinite(area):
            return area
    return 0.0
