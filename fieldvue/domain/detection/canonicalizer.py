"""
Label canonicalization.

The vision model labels the same construction element many ways ("Wall",
"exterior wall", "brick cladding"). Counting and area sums need one stable
key per element class, so every candidate is folded onto a canonical type
before it is counted.

Rules live in plain mapping tables per scene type. Bump RULES_VERSION
whenever a table changes; the version is stored on every room aggregate so
old totals can be told apart from new ones.
"""

import re
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..constants.enums import SceneType

RULES_VERSION = "2"

FALLBACK_TYPE = "object"

_WHITESPACE = re.compile(r"\s+")


def _freeze(table: dict) -> Mapping[str, str]:
    return MappingProxyType(dict(table))


# Synonym -> canonical type. Keys and values are already normalized.
SYNONYM_TABLES: Mapping[SceneType, Mapping[str, str]] = MappingProxyType({
    SceneType.INTERIOR: _freeze({
        "walls": "wall",
        "interior_wall": "wall",
        "ceilings": "ceiling",
        "windows": "window",
        "doors": "door",
        "door_frame": "door",
        "baseboards": "baseboard",
        "base_board": "baseboard",
        "crown_molding": "crown_moulding",
        "crown_mouldings": "crown_moulding",
        "crown_moldings": "crown_moulding",
        "moulding": "crown_moulding",
        "molding": "crown_moulding",
        "trims": "trim",
        "casing": "trim",
        "railings": "railing",
        "handrail": "railing",
    }),
    SceneType.EXTERIOR: _freeze({
        "wall": "siding",
        "walls": "siding",
        "exterior_wall": "siding",
        "cladding": "siding",
        "stucco": "siding",
        "masonry": "siding",
        "brick": "siding",
        "brick_wall": "siding",
        "masonry_foundation": "foundation",
        "brick_foundation": "foundation",
        "foundation_band": "foundation",
        "stone_foundation": "foundation",
        "concrete_foundation": "foundation",
        "windows": "window",
        "doors": "door",
        "garage_door": "door",
        "roofs": "roof",
        "roofing": "roof",
        "gutters": "gutter",
        "downspout": "gutter",
        "downspouts": "gutter",
        "fascia": "trim",
        "soffit": "trim",
        "soffits": "trim",
        "corner_trim": "trim",
        "trims": "trim",
        "railings": "railing",
    }),
})

# Context overrides: (raw types, keyword in raw name, canonical type).
# Checked before the synonym table; brick is siding unless the name tags it
# as a foundation band.
CONTEXT_RULES: Mapping[SceneType, Tuple[Tuple[frozenset, str, str], ...]] = MappingProxyType({
    SceneType.INTERIOR: (),
    SceneType.EXTERIOR: (
        (frozenset({"brick", "masonry", "stone", "block"}), "foundation", "foundation"),
    ),
})


def normalize_label(value: Optional[str]) -> Optional[str]:
    """
    Lower-case, trim and collapse internal whitespace to single underscores.

    Returns None for missing or blank input.
    """
    if value is None:
        return None
    text = _WHITESPACE.sub("_", str(value).strip().lower())
    return text or None


def canonicalize(
    scene_type: SceneType,
    raw_type: Optional[str],
    raw_name: Optional[str] = None,
) -> str:
    """
    Map a detector's raw type/name onto a canonical object type.

    The normalized raw type is used as the label, falling back to the
    normalized raw name and finally to ``"object"``. The label is then run
    through the scene's context rules and synonym table; labels with no rule
    are returned as-is. Applying the function to its own output returns the
    output unchanged.

    Args:
        scene_type: Rule set to apply (interior or exterior)
        raw_type: The detector's type tag
        raw_name: The detector's free-text name

    Returns:
        Canonical object type key
    """
    scene_type = SceneType(scene_type)
    normalized_type = normalize_label(raw_type)
    normalized_name = normalize_label(raw_name)
    label = normalized_type or normalized_name
    if label is None:
        return FALLBACK_TYPE

    for raw_types, keyword, canonical in CONTEXT_RULES[scene_type]:
        if label in raw_types and normalized_name and keyword in normalized_name:
            return canonical

    return SYNONYM_TABLES[scene_type].get(label, label)


def canonical_targets(scene_type: SceneType) -> frozenset:
    """All canonical types a scene's rules can produce."""
    scene_type = SceneType(scene_type)
    targets = set(SYNONYM_TABLES[scene_type].values())
    targets.update(canonical for _, _, canonical in CONTEXT_RULES[scene_type])
    return frozenset(targets)
