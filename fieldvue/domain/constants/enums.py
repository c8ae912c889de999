"""Enumerations shared across the domain."""

from enum import Enum


class UserRole(str, Enum):
    """Account roles; drive job visibility and creation rights."""
    CUSTOMER = "customer"
    CONTRACTOR = "contractor"
    ADMIN = "admin"


class JobStatus(str, Enum):
    """Job lifecycle states."""
    PENDING = "pending"
    ESTIMATED = "estimated"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class SceneType(str, Enum):
    """Detection rule set a room's images are analyzed under."""
    INTERIOR = "interior"
    EXTERIOR = "exterior"


class ConfidenceLevel(str, Enum):
    """Confidence tags the vision model is asked to emit."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
