# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..constants.enums import SceneType
from .measurement import RoomDimensions


@dataclass(frozen=True)
class AggregateItem:
    """One consolidated row of a room aggregate."""
    type: str
    count: int
    sqft: float

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "count": self.count, "sqft": self.sqft}


@dataclass
class RoomAggregate:
    """
    Room-level summary derived from all of a room's per-image measurements.

    Never authoritative on its own: it is always recomputed from the
    measurements, so counts_by_type[t] equals the sum over images.
    """
    items: List[AggregateItem] = field(default_factory=list)
    counts_by_type: Dict[str, int] = field(default_factory=dict)
    area_sqft_by_type: Dict[str, float] = field(default_factory=dict)
    room_dimensions: Optional[RoomDimensions] = None
    image_count: int = 0
    failed_images: List[str] = field(default_factory=list)
    processed_at: Optional[datetime] = None
    rules_version: Optional[str] = None


@dataclass
class Room:
    """
    Pure domain model for a room (or exterior elevation) of a job.

    ``room_type`` selects the canonicalization and confidence rules used when
    its images are analyzed.
    """
    id: Optional[str]
    job_id: str
    name: str
    room_type: SceneType = SceneType.INTERIOR
    image_urls: List[str] = field(default_factory=list)
    aggregate: Optional[RoomAggregate] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.job_id:
            raise ValueError("Job ID is required")
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Room name is required")
        self.room_type = SceneType(self.room_type)
