"""
Room aggregation: fold per-image measurements into a RoomAggregate.

The aggregate is always a pure function of the measurements passed in; it
never reads or patches a previous aggregate.
"""

import math
from collections import defaultdict
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from ...utils.datetime_utils import utc_now
from ..models.measurement import PerImageMeasurement, RoomDimensions
from ..models.room import AggregateItem, RoomAggregate
from .canonicalizer import RULES_VERSION


def _max_or_none(values: List[float]) -> Optional[float]:
    return max(values) if values else None


def merge_room_dimensions(dimensions: Iterable[Optional[RoomDimensions]]) -> Optional[RoomDimensions]:
    """
    Merge room-size estimates field by field, keeping the largest value.

    Returns None when no image reported any dimension.
    """
    widths: List[float] = []
    heights: List[float] = []
    lengths: List[float] = []
    for dims in dimensions:
        if dims is None:
            continue
        if dims.estimated_width is not None:
            widths.append(dims.estimated_width)
        if dims.estimated_height is not None:
            heights.append(dims.estimated_height)
        if dims.estimated_length is not None:
            lengths.append(dims.estimated_length)

    merged = RoomDimensions(
        estimated_width=_max_or_none(widths),
        estimated_height=_max_or_none(heights),
        estimated_length=_max_or_none(lengths),
    )
    return None if merged.is_empty() else merged


def aggregate_room(
    measurements: Iterable[PerImageMeasurement],
    processed_at: Optional[datetime] = None,
) -> RoomAggregate:
    """
    Sum counts and areas across all of a room's current measurements.

    Failed measurements (error marker set) still contribute whatever counts
    they carry from an earlier successful analysis, and are listed in
    ``failed_images``.

    Args:
        measurements: Every current measurement of the room
        processed_at: Timestamp to stamp on the aggregate (defaults to now)

    Returns:
        RoomAggregate with items sorted by type
    """
    measurements = list(measurements)
    counts: Dict[str, int] = defaultdict(int)
    areas: Dict[str, List[float]] = defaultdict(list)

    for measurement in measurements:
        for type_key, count in measurement.counts_by_type.items():
            counts[type_key] += int(count)
        for type_key, area in measurement.area_sqft_by_type.items():
            areas[type_key].append(float(area))

    types = sorted(set(counts) | set(areas))
    counts_by_type = {key: counts.get(key, 0) for key in types}
    area_sqft_by_type = {key: math.fsum(areas.get(key, [])) for key in types}

    return RoomAggregate(
        items=[
            AggregateItem(type=key, count=counts_by_type[key], sqft=area_sqft_by_type[key])
            for key in types
        ],
        counts_by_type=counts_by_type,
        area_sqft_by_type=area_sqft_by_type,
        room_dimensions=merge_room_dimensions(m.room_dimensions for m in measurements),
        image_count=len(measurements),
        failed_images=sorted(m.image_url for m in measurements if m.failed),
        processed_at=processed_at or utc_now(),
        rules_version=RULES_VERSION,
    )
