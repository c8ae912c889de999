"""
Parsing of raw detector payloads.

The detector returns loosely structured JSON. Two shapes are understood:

    {"objects": [{"type", "name", "confidence", "bounding_box", ...}], ...}
    {"architectural_elements": {"<category>": [{...}, ...]}, ...}

In the second shape the category key is the raw type of each item. Anything
else about the payload is best-effort: bad entries are skipped, not fatal.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ...core.exceptions import MalformedDetectionError
from ..models.measurement import BoundingBox, DetectionCandidate, RoomDimensions
from .area import to_number

logger = logging.getLogger(__name__)


@dataclass
class ParsedDetection:
    """Candidates and free-text fields extracted from one payload."""
    candidates: List[DetectionCandidate] = field(default_factory=list)
    scene: Optional[str] = None
    summary: Optional[str] = None
    room_dimensions: Optional[RoomDimensions] = None


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_bounding_box(value: Any) -> Optional[BoundingBox]:
    if not isinstance(value, dict):
        return None
    coords = [to_number(value.get(key)) for key in ("x", "y", "width", "height")]
    if any(coord is None for coord in coords):
        return None
    return BoundingBox(*coords)


def _parse_candidate(item: Dict[str, Any], raw_type: Any = None) -> DetectionCandidate:
    return DetectionCandidate(
        raw_name=_text(item.get("name")),
        raw_type=_text(raw_type if raw_type is not None else item.get("type")),
        confidence=_text(item.get("confidence")),
        bounding_box=_parse_bounding_box(item.get("bounding_box")),
        estimated_width_feet=item.get("estimated_width_feet"),
        estimated_height_feet=item.get("estimated_height_feet"),
        surface_area=item.get("surface_area"),
    )


def parse_room_dimensions(value: Any) -> Optional[RoomDimensions]:
    """Extract a room-size estimate; None when no field is usable."""
    if not isinstance(value, dict):
        return None
    dimensions = RoomDimensions(
        estimated_width=to_number(value.get("estimated_width")),
        estimated_height=to_number(value.get("estimated_height")),
        estimated_length=to_number(value.get("estimated_length")),
    )
    return None if dimensions.is_empty() else dimensions


def parse_detection_payload(payload: Any) -> ParsedDetection:
    """
    Turn a raw detector payload into detection candidates.

    Args:
        payload: Decoded JSON returned by the detection client

    Returns:
        ParsedDetection with candidates, scene, summary and room dimensions

    Raises:
        MalformedDetectionError: If the payload is not an object, or carries
            neither an ``objects`` list nor an ``architectural_elements`` map
    """
    if not isinstance(payload, dict):
        raise MalformedDetectionError(
            f"Detection payload must be a JSON object, got {type(payload).__name__}"
        )

    objects = payload.get("objects")
    elements = payload.get("architectural_elements")

    if objects is not None and not isinstance(objects, list):
        raise MalformedDetectionError("Detection payload 'objects' is not a list")
    if objects is None and not isinstance(elements, dict):
        raise MalformedDetectionError("Detection payload has no 'objects' list")

    parsed = ParsedDetection(
        scene=_text(payload.get("scene")),
        summary=_text(payload.get("summary")),
        room_dimensions=parse_room_dimensions(payload.get("room_dimensions")),
    )

    skipped = 0
    for item in objects or []:
        if not isinstance(item, dict):
            skipped += 1
            continue
        parsed.candidates.append(_parse_candidate(item))

    if isinstance(elements, dict):
        for category, items in elements.items():
            if not isinstance(items, list):
                skipped += 1
                continue
            for item in items:
                if not isinstance(item, dict):
                    skipped += 1
                    continue
                parsed.candidates.append(_parse_candidate(item, raw_type=category))

    if skipped:
        logger.debug(f"Skipped {skipped} malformed detection entries")

    return parsed
