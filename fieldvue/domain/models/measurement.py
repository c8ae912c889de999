"""
Detection and measurement domain models.

DetectionCandidate is what the external detector hands back for one object;
it is never persisted verbatim. PerImageMeasurement is the normalized result
of analyzing one image of a room.
"""

# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class BoundingBox:
    """Bounding box as percentages of the image (0-100)."""
    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class DetectionCandidate:
    """
    One element of a raw detection payload.

    Numeric fields keep whatever the detector sent (number, numeric string or
    junk); the area resolver decides what is usable.
    """
    raw_name: Optional[str] = None
    raw_type: Optional[str] = None
    confidence: Optional[str] = None
    bounding_box: Optional[BoundingBox] = None
    estimated_width_feet: Any = None
    estimated_height_feet: Any = None
    surface_area: Any = None


@dataclass(frozen=True)
class AcceptedDetection:
    """A candidate that passed the confidence filter, with its canonical type and area."""
    canonical_type: str
    area_sqft: float
    candidate: DetectionCandidate

    def to_dict(self) -> Dict[str, Any]:
        candidate = self.candidate
        return {
            "type": self.canonical_type,
            "raw_type": candidate.raw_type,
            "name": candidate.raw_name,
            "confidence": candidate.confidence,
            "bounding_box": candidate.bounding_box.to_dict() if candidate.bounding_box else None,
            "area_sqft": self.area_sqft,
        }


@dataclass(frozen=True)
class RoomDimensions:
    """Room-size estimate in feet reported by the detector (any field may be missing)."""
    estimated_width: Optional[float] = None
    estimated_height: Optional[float] = None
    estimated_length: Optional[float] = None

    def is_empty(self) -> bool:
        return (
            self.estimated_width is None
            and self.estimated_height is None
            and self.estimated_length is None
        )

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {
            "estimated_width": self.estimated_width,
            "estimated_height": self.estimated_height,
            "estimated_length": self.estimated_length,
        }


@dataclass
class PerImageMeasurement:
    """
    Normalized analysis of one room image.

    Keyed by (room_id, image_url); reprocessing the same image overwrites it.
    ``error`` is set when the latest analysis attempt failed.
    """
    room_id: str
    image_url: str
    counts_by_type: Dict[str, int] = field(default_factory=dict)
    area_sqft_by_type: Dict[str, float] = field(default_factory=dict)
    objects: List[Dict[str, Any]] = field(default_factory=list)
    scene: Optional[str] = None
    summary: Optional[str] = None
    room_dimensions: Optional[RoomDimensions] = None
    processed_at: Optional[datetime] = None
    error: Optional[str] = None
    error_at: Optional[datetime] = None
    id: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.room_id:
            raise ValueError("Room ID is required")
        if not self.image_url:
            raise ValueError("Image URL is required")

    @property
    def failed(self) -> bool:
        return self.error is not None
