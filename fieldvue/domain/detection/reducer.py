"""
Per-image reduction: raw candidates -> counts and areas by canonical type.
"""

import math
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from ...utils.datetime_utils import utc_now
from ..constants.enums import SceneType
from ..models.measurement import AcceptedDetection, DetectionCandidate, PerImageMeasurement
from .area import resolve_area
from .canonicalizer import canonicalize
from .confidence import ConfidencePolicy
from .payload import parse_detection_payload


@dataclass
class ReductionResult:
    accepted: List[AcceptedDetection]
    counts_by_type: Dict[str, int]
    area_sqft_by_type: Dict[str, float]


def reduce_candidates(
    candidates: Iterable[DetectionCandidate],
    scene_type: SceneType,
    policy: ConfidencePolicy,
) -> ReductionResult:
    """
    Canonicalize, filter and tally a list of candidates.

    Each accepted candidate adds 1 to its type's count and its resolved area
    to the type's area. Areas are summed with math.fsum, so permuting the
    candidates yields identical maps. Every accepted type has an area entry
    (0.0 when nothing measurable was reported).
    """
    scene_type = SceneType(scene_type)
    accepted: List[AcceptedDetection] = []
    counts: Dict[str, int] = defaultdict(int)
    areas: Dict[str, List[float]] = defaultdict(list)

    for candidate in candidates:
        canonical_type = canonicalize(scene_type, candidate.raw_type, candidate.raw_name)
        if not policy.accepts(scene_type, canonical_type, candidate.confidence):
            continue
        area = resolve_area(candidate)
        accepted.append(AcceptedDetection(canonical_type, area, candidate))
        counts[canonical_type] += 1
        areas[canonical_type].append(area)

    return ReductionResult(
        accepted=accepted,
        counts_by_type={key: counts[key] for key in sorted(counts)},
        area_sqft_by_type={key: math.fsum(areas[key]) for key in sorted(areas)},
    )


def build_measurement(
    room_id: str,
    image_url: str,
    payload: Any,
    scene_type: SceneType,
    policy: ConfidencePolicy,
    processed_at: Optional[datetime] = None,
) -> PerImageMeasurement:
    """
    Reduce one raw detector payload into a PerImageMeasurement.

    Raises:
        MalformedDetectionError: If the payload cannot be parsed
    """
    parsed = parse_detection_payload(payload)
    result = reduce_candidates(parsed.candidates, scene_type, policy)
    return PerImageMeasurement(
        room_id=room_id,
        image_url=image_url,
        counts_by_type=result.counts_by_type,
        area_sqft_by_type=result.area_sqft_by_type,
        objects=[detection.to_dict() for detection in result.accepted],
        scene=parsed.scene,
        summary=parsed.summary,
        room_dimensions=parsed.room_dimensions,
        processed_at=processed_at or utc_now(),
    )
