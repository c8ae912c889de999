"""
Unit tests for per-image reduction.
"""
import itertools
import json
from datetime import datetime, timezone

import pytest

from fieldvue.core.exceptions import MalformedDetectionError
from fieldvue.domain.constants.enums import SceneType
from fieldvue.domain.detection import ConfidencePolicy, build_measurement, reduce_candidates
from fieldvue.domain.models.measurement import DetectionCandidate


@pytest.fixture
def policy():
    return ConfidencePolicy()


class TestReduceCandidates:
    def test_counts_and_areas(self, policy):
        candidates = [
            DetectionCandidate(raw_type="window", confidence="high", estimated_width_feet=3, estimated_height_feet=4),
            DetectionCandidate(raw_type="windows", confidence="high", surface_area=20),
            DetectionCandidate(raw_type="window", confidence="low", surface_area=100),
            DetectionCandidate(raw_type="door", confidence="high"),
        ]
        result = reduce_candidates(candidates, SceneType.INTERIOR, policy)
        assert result.counts_by_type == {"door": 1, "window": 2}
        assert result.area_sqft_by_type == {"door": 0.0, "window": 32.0}
        assert len(result.accepted) == 3

    def test_exterior_low_confidence(self, policy):
        candidates = [
            DetectionCandidate(raw_type="siding", confidence="low", surface_area=250),
            DetectionCandidate(raw_type="window", confidence="low", surface_area=12),
        ]
        result = reduce_candidates(candidates, SceneType.EXTERIOR, policy)
        assert result.counts_by_type == {"siding": 1}
        assert result.area_sqft_by_type == {"siding": 250.0}

    def test_order_independent(self, policy):
        candidates = [
            DetectionCandidate(raw_type="wall", confidence="high", surface_area=0.1),
            DetectionCandidate(raw_type="wall", confidence="high", surface_area=0.2),
            DetectionCandidate(raw_type="wall", confidence="high", surface_area=0.3),
            DetectionCandidate(raw_type="trim", confidence="high", surface_area=1e-9),
        ]
        results = [
            reduce_candidates(list(order), SceneType.INTERIOR, policy)
            for order in itertools.permutations(candidates)
        ]
        first = results[0]
        for result in results[1:]:
            assert result.counts_by_type == first.counts_by_type
            assert result.area_sqft_by_type == first.area_sqft_by_type


class TestBuildMeasurement:
    def test_builds_measurement(self, policy):
        processed_at = datetime(2024, 5, 1, tzinfo=timezone.utc)
        measurement = build_measurement(
            "room-1",
            "http://files/a.jpg",
            {
                "objects": [{"type": "Window", "name": "Bay window", "confidence": "high", "surface_area": 15}],
                "room_dimensions": {"estimated_width": 12},
            },
            SceneType.INTERIOR,
            policy,
            processed_at=processed_at,
        )
        assert measurement.counts_by_type == {"window": 1}
        assert measurement.objects[0]["type"] == "window"
        assert measurement.objects[0]["name"] == "Bay window"
        assert measurement.room_dimensions.estimated_width == 12.0
        assert measurement.processed_at == processed_at
        assert not measurement.failed

    def test_malformed_payload_raises(self, policy):
        with pytest.raises(MalformedDetectionError):
            build_measurement("room-1", "u", {"nothing": True}, SceneType.INTERIOR, policy)

    def test_oversized_integer_still_counts(self, policy):
        payload = json.loads(
            '{"objects": [{"type": "window", "confidence": "high", "surface_area": 1' + "0" * 400 + "}]}"
        )
        measurement = build_measurement("room-1", "u", payload, SceneType.INTERIOR, policy)
        assert measurement.counts_by_type == {"window": 1}
        assert measurement.area_sqft_by_type == {"window": 0.0}
