from .user import User
from .customer import Customer
from .job import Job
from .room import Room, RoomAggregate, AggregateItem
from .measurement import (
    BoundingBox,
    DetectionCandidate,
    AcceptedDetection,
    RoomDimensions,
    PerImageMeasurement,
)

__all__ = [
    "User",
    "Customer",
    "Job",
    "Room",
    "RoomAggregate",
    "AggregateItem",
    "BoundingBox",
    "DetectionCandidate",
    "AcceptedDetection",
    "RoomDimensions",
    "PerImageMeasurement",
]
