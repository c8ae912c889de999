"""
Unit tests for detection payload parsing.
"""
import pytest

from fieldvue.core.exceptions import MalformedDetectionError
from fieldvue.domain.detection import parse_detection_payload
from fieldvue.domain.detection.payload import parse_room_dimensions


class TestParseDetectionPayload:
    def test_objects_list(self):
        parsed = parse_detection_payload({
            "scene": "Living room",
            "summary": " Bright room ",
            "objects": [
                {
                    "name": "Window",
                    "type": "window",
                    "confidence": "high",
                    "bounding_box": {"x": 1, "y": 2, "width": 30, "height": 40},
                    "estimated_width_feet": 3,
                    "estimated_height_feet": 4,
                },
                "garbage",
            ],
        })
        assert len(parsed.candidates) == 1
        candidate = parsed.candidates[0]
        assert candidate.raw_type == "window"
        assert candidate.bounding_box.width == 30.0
        assert parsed.scene == "Living room"
        assert parsed.summary == "Bright room"

    def test_architectural_elements_use_category_as_type(self):
        parsed = parse_detection_payload({
            "architectural_elements": {
                "siding": [{"name": "Vinyl siding", "confidence": "low", "surface_area": 300}],
                "gutters": "not a list",
            },
        })
        assert [c.raw_type for c in parsed.candidates] == ["siding"]

    def test_bad_bounding_box_dropped(self):
        parsed = parse_detection_payload({
            "objects": [{"type": "door", "confidence": "high", "bounding_box": {"x": "a"}}],
        })
        assert parsed.candidates[0].bounding_box is None

    @pytest.mark.parametrize("payload", [
        None,
        [],
        "text",
        {},
        {"objects": "nope"},
        {"scene": "x"},
    ])
    def test_malformed_payloads(self, payload):
        with pytest.raises(MalformedDetectionError):
            parse_detection_payload(payload)

    def test_empty_objects_is_valid(self):
        assert parse_detection_payload({"objects": []}).candidates == []


class TestParseRoomDimensions:
    def test_partial_dimensions(self):
        dims = parse_room_dimensions({"estimated_width": "12", "estimated_length": None})
        assert dims.estimated_width == 12.0
        assert dims.estimated_length is None

    def test_empty_is_none(self):
        assert parse_room_dimensions({"estimated_width": "?"}) is None
        assert parse_room_dimensions("12x10") is None
