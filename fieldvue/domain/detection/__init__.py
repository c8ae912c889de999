"""Detection aggregation pipeline: canonicalize, filter, measure, reduce, aggregate."""

from .aggregator import aggregate_room, merge_room_dimensions
from .area import resolve_area, to_number
from .canonicalizer import (
    CONTEXT_RULES,
    FALLBACK_TYPE,
    RULES_VERSION,
    SYNONYM_TABLES,
    canonical_targets,
    canonicalize,
    normalize_label,
)
from .confidence import ConfidencePolicy
from .payload import ParsedDetection, parse_detection_payload
from .reducer import ReductionResult, build_measurement, reduce_candidates

__all__ = [
    "aggregate_room",
    "merge_room_dimensions",
    "resolve_area",
    "to_number",
    "CONTEXT_RULES",
    "FALLBACK_TYPE",
    "RULES_VERSION",
    "SYNONYM_TABLES",
    "canonical_targets",
    "canonicalize",
    "normalize_label",
    "ConfidencePolicy",
    "ParsedDetection",
    "parse_detection_payload",
    "ReductionResult",
    "build_measurement",
    "reduce_candidates",
]
