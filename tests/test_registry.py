"""
Tests for the question/scale registry.

Covers the structural invariants of the built-in questionnaire and the
validation performed when a registry is built or thresholds are overridden.
"""

import json

import pytest

from models.enums import (
    CONTROL_SCALE_KEYS,
    QUESTION_COUNT,
    SCALE_KEYS,
    ConditionKey,
    ZoneKey,
)
from models.errors import RegistryError
from models.registry import (
    ThresholdOverrides,
    ValidityThreshold,
    build_control_zones,
    build_registry,
    load_threshold_overrides,
)


class TestBuiltInRegistry:
    """Invariants of the shipped questionnaire."""

    def test_question_ids_cover_range(self, registry):
        assert [q.id for q in registry.questions] == list(range(QUESTION_COUNT))
        assert registry.question_count == 112

    def test_scale_order(self, registry):
        assert list(registry.scales) == SCALE_KEYS
        assert registry.control_keys == tuple(CONTROL_SCALE_KEYS)

    def test_each_question_in_exactly_one_scale(self, registry):
        seen = []
        for scale in registry.scales.values():
            seen.extend(scale.question_ids)
        assert sorted(seen) == list(range(QUESTION_COUNT))

    def test_subscales_within_parent(self, registry):
        for scale in registry.scales.values():
            members = set(scale.question_ids)
            sub_seen = []
            for sub in scale.subscales:
                assert set(sub.question_ids) <= members
                sub_seen.extend(sub.question_ids)
            assert len(sub_seen) == len(set(sub_seen)), f"{scale.key} subscales overlap"

    def test_max_score_is_four_per_item(self, registry):
        for scale in registry.scales.values():
            assert scale.max_score == 4 * len(scale.question_ids)
            for sub in scale.subscales:
                assert sub.max_score == 4 * len(sub.question_ids)

    def test_item_counts(self, registry):
        counts = {key: len(scale.question_ids) for key, scale in registry.scales.items()}
        assert counts == {
            "A": 14, "B": 12, "C": 8, "D": 14, "E": 10, "F": 10, "G": 8,
            "H": 8, "I": 7, "J": 7, "L": 4, "M": 3, "K": 3, "N": 4,
        }

    def test_mirrored_items_restate_trait_items(self, registry):
        mirrored = [q for q in registry.questions if q.mirror_of is not None]
        assert {q.id: q.mirror_of for q in mirrored} == {15: 2, 55: 41, 87: 60}
        for q in mirrored:
            assert q.scale_key == "K"
            assert registry.questions_by_id[q.mirror_of].scale_key not in registry.control_keys

    def test_control_scales_flagged(self, registry):
        for key, scale in registry.scales.items():
            assert scale.control == (key in CONTROL_SCALE_KEYS)

    def test_conditions_reference_known_scales(self, registry):
        assert list(registry.condition_scales) == list(ConditionKey)
        for scale_keys in registry.condition_scales.values():
            for key in scale_keys:
                assert key in registry.substantive_keys

    def test_default_thresholds(self, registry):
        assert registry.thresholds_source == "default"
        assert registry.validity_thresholds["L"].critical == 75
        assert registry.condition_thresholds["adhd"].cut == 60


class TestControlZones:
    """Control scale zones follow the validity thresholds."""

    def test_bands(self):
        zones = build_control_zones(ValidityThreshold(moderate=50, critical=75))
        assert [(z.low, z.high) for z in zones] == [(0, 49), (50, 74), (75, 100)]
        assert [z.key for z in zones] == [ZoneKey.LOW.value, ZoneKey.MODERATE.value, ZoneKey.HIGH.value]

    def test_threshold_order_enforced(self):
        with pytest.raises(ValueError):
            ValidityThreshold(moderate=60, critical=60)


class TestBuildValidation:
    """Malformed registries are rejected."""

    def test_missing_question_id(self):
        with pytest.raises(RegistryError):
            build_registry(
                questions=[(0, "X", None, "a"), (2, "X", None, "b")],
                metadata={"X": ("X", "", "", [])},
                mirrored_items={},
                control_keys=[],
                condition_scales={},
                question_count=3,
            )

    def test_unknown_scale(self):
        with pytest.raises(RegistryError):
            build_registry(
                questions=[(0, "Y", None, "a")],
                metadata={"X": ("X", "", "", [])},
                mirrored_items={},
                control_keys=[],
                condition_scales={},
                question_count=1,
            )

    def test_unknown_subscale(self):
        with pytest.raises(RegistryError):
            build_registry(
                questions=[(0, "X", "X9", "a")],
                metadata={"X": ("X", "", "", [("X1", "Sub")])},
                mirrored_items={},
                control_keys=[],
                condition_scales={},
                question_count=1,
            )

    def test_scale_without_questions(self):
        with pytest.raises(RegistryError):
            build_registry(
                questions=[(0, "X", None, "a")],
                metadata={"X": ("X", "", "", []), "Y": ("Y", "", "", [])},
                mirrored_items={},
                control_keys=[],
                condition_scales={},
                question_count=1,
            )

    def test_mirror_of_control_item(self):
        with pytest.raises(RegistryError):
            build_registry(
                questions=[(0, "L", None, "a"), (1, "K", None, "b")],
                metadata={"L": ("L", "", "", []), "K": ("K", "", "", [])},
                mirrored_items={1: 0},
                control_keys=["L", "K"],
                condition_scales={},
                question_count=2,
            )

    def test_condition_with_unknown_scale(self):
        with pytest.raises(RegistryError):
            build_registry(
                questions=[(0, "X", None, "a")],
                metadata={"X": ("X", "", "", [])},
                mirrored_items={},
                control_keys=[],
                condition_scales={ConditionKey.ADHD: ("A",)},
                question_count=1,
            )


class TestThresholdOverrides:
    """Thresholds file loading."""

    def test_overrides_applied(self):
        overrides = ThresholdOverrides(
            validity={"L": {"moderate": 40, "critical": 60}},
            conditions={"adhd": {"cut": 70, "borderline_band": 5}},
        )
        registry = build_registry(overrides=overrides)

        assert registry.thresholds_source == "file"
        assert registry.validity_thresholds["L"].moderate == 40
        assert registry.validity_thresholds["M"].critical == 50
        assert registry.condition_thresholds["adhd"].cut == 70
        assert registry.condition_thresholds["asd"].cut == 60
        l_zones = registry.get_scale("L").zones
        assert [(z.low, z.high) for z in l_zones] == [(0, 39), (40, 59), (60, 100)]

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "thresholds.json"
        path.write_text(json.dumps({"conditions": {"dyslexia": {"cut": 55}}}), encoding="utf-8")

        overrides = load_threshold_overrides(str(path))
        assert overrides.conditions["dyslexia"].cut == 55
        assert overrides.conditions["dyslexia"].borderline_band == 10
        assert overrides.validity == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(RegistryError):
            load_threshold_overrides(str(tmp_path / "missing.json"))

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "thresholds.json"
        path.write_text(json.dumps({"validity": {"L": {"moderate": 80, "critical": 70}}}), encoding="utf-8")

        with pytest.raises(RegistryError) as exc_info:
            load_threshold_overrides(str(path))
        assert exc_info.value.error_code == "REGISTRY_ERROR"

    def test_unknown_control_scale_override_rejected(self):
        overrides = ThresholdOverrides(validity={"l": {"moderate": 40, "critical": 60}})

        with pytest.raises(RegistryError, match="unknown control scales"):
            build_registry(overrides=overrides)

    def test_trait_scale_override_rejected(self):
        overrides = ThresholdOverrides(validity={"A": {"moderate": 40, "critical": 60}})

        with pytest.raises(RegistryError):
            build_registry(overrides=overrides)

    def test_unknown_condition_override_rejected(self):
        overrides = ThresholdOverrides(conditions={"ADHD": {"cut": 70}})

        with pytest.raises(RegistryError, match="unknown conditions"):
            build_registry(overrides=overrides)
