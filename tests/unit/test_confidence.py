"""
Unit tests for the confidence policy.
"""
from fieldvue.domain.constants.enums import SceneType
from fieldvue.domain.detection import ConfidencePolicy


class TestConfidencePolicy:
    def test_default_accepts_high_only(self):
        policy = ConfidencePolicy()
        assert policy.accepts(SceneType.INTERIOR, "window", "high")
        assert policy.accepts(SceneType.INTERIOR, "window", " HIGH ")
        assert not policy.accepts(SceneType.INTERIOR, "window", "medium")
        assert not policy.accepts(SceneType.INTERIOR, "window", "low")

    def test_exterior_siding_and_foundation_are_lenient(self):
        policy = ConfidencePolicy()
        assert policy.accepts(SceneType.EXTERIOR, "siding", "low")
        assert policy.accepts(SceneType.EXTERIOR, "foundation", "medium")
        assert not policy.accepts(SceneType.EXTERIOR, "window", "low")

    def test_lenient_types_are_scene_specific(self):
        policy = ConfidencePolicy()
        assert not policy.accepts(SceneType.INTERIOR, "siding", "low")

    def test_unknown_or_missing_confidence_rejected(self):
        policy = ConfidencePolicy()
        assert not policy.accepts(SceneType.EXTERIOR, "siding", "certain")
        assert not policy.accepts(SceneType.EXTERIOR, "siding", None)
        assert not policy.accepts(SceneType.EXTERIOR, "siding", 0.9)

    def test_from_settings(self):
        policy = ConfidencePolicy.from_settings([" Wall ", ""], [])
        assert policy.accepts(SceneType.INTERIOR, "wall", "low")
        assert not policy.accepts(SceneType.EXTERIOR, "siding", "low")

    def test_from_settings_normalizes_like_labels(self):
        policy = ConfidencePolicy.from_settings(["Crown  Molding"], ["  garage door "])
        assert policy.accepts(SceneType.INTERIOR, "crown_molding", "medium")
        assert policy.accepts(SceneType.EXTERIOR, "garage_door", "low")
