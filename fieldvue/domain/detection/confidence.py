"""
Confidence filter.

Only "high" detections are counted by default. Lenient types (exterior siding
and foundation out of the box) also accept "medium" and "low". Anything that
is not a recognized tag is rejected.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping, Optional

from ..constants.enums import ConfidenceLevel, SceneType
from .canonicalizer import normalize_label

KNOWN_LEVELS: FrozenSet[str] = frozenset(level.value for level in ConfidenceLevel)

DEFAULT_ACCEPTED: FrozenSet[str] = frozenset({ConfidenceLevel.HIGH.value})

LENIENT_ACCEPTED: FrozenSet[str] = KNOWN_LEVELS

DEFAULT_LENIENT_TYPES: Mapping[SceneType, FrozenSet[str]] = {
    SceneType.INTERIOR: frozenset(),
    SceneType.EXTERIOR: frozenset({"siding", "foundation"}),
}


def _normalized_types(values: Iterable[str]) -> FrozenSet[str]:
    return frozenset(label for label in (normalize_label(value) for value in values) if label)


def normalize_confidence(value: object) -> Optional[str]:
    """Lower-case and trim a confidence tag; None when it is not a string."""
    if not isinstance(value, str):
        return None
    return value.strip().lower() or None


@dataclass(frozen=True)
class ConfidencePolicy:
    """
    Per-scene acceptance rules.

    ``lenient_types`` maps a scene type to the canonical types that accept
    every known confidence level; all other types accept ``default_accepted``.
    """
    lenient_types: Mapping[SceneType, FrozenSet[str]] = field(
        default_factory=lambda: dict(DEFAULT_LENIENT_TYPES)
    )
    default_accepted: FrozenSet[str] = DEFAULT_ACCEPTED

    @classmethod
    def from_settings(
        cls,
        interior_lenient: Iterable[str],
        exterior_lenient: Iterable[str],
    ) -> "ConfidencePolicy":
        """
        Build a policy from configured lists of lenient types.

        Entries are normalized like detector labels, so "crown molding"
        matches the canonical "crown_molding".
        """
        lenient: Dict[SceneType, FrozenSet[str]] = {
            SceneType.INTERIOR: _normalized_types(interior_lenient),
            SceneType.EXTERIOR: _normalized_types(exterior_lenient),
        }
        return cls(lenient_types=lenient)

    def accepted_levels(self, scene_type: SceneType, canonical_type: str) -> FrozenSet[str]:
        """The confidence tags accepted for a canonical type in a scene."""
        scene_type = SceneType(scene_type)
        if canonical_type in self.lenient_types.get(scene_type, frozenset()):
            return LENIENT_ACCEPTED
        return self.default_accepted

    def accepts(self, scene_type: SceneType, canonical_type: str, confidence: object) -> bool:
        """
        Decide whether a detection counts.

        Args:
            scene_type: Scene the image was analyzed under
            canonical_type: Canonicalized object type
            confidence: Raw confidence tag from the detector

        Returns:
            True when the tag is known and accepted for this type
        """
        level = normalize_confidence(confidence)
        if level is None or level not in KNOWN_LEVELS:
            return False
        return level in self.accepted_levels(scene_type, canonical_type)
