"""Tests for floorplan/config.py."""
import json
import math
import pytest
from pagegeom.geometry import InvalidDimension
from pagegeom.page import PageFormat, CenteringPolicy
from floorplan import constants
from floorplan.config import (
    PlanConfig, DEFAULT_CONFIG, validate_config, config_from_dict, load_config,
)


def test_defaults_come_from_constants():
    assert DEFAULT_CONFIG.plan_width == constants.PLAN_WIDTH
    assert DEFAULT_CONFIG.door_size == pytest.approx(0.9144)
    assert DEFAULT_CONFIG.page is PageFormat.A4
    assert DEFAULT_CONFIG.centering is CenteringPolicy.FULL_CENTER
    assert DEFAULT_CONFIG.bathroom_swap_axes is True


def test_default_is_valid():
    assert validate_config(DEFAULT_CONFIG) is DEFAULT_CONFIG


@pytest.mark.parametrize("field,value", [
    ("door_size", 0.0), ("bathroom_width", -1.0), ("icon_native_size", math.inf),
    ("wash_basin_height", "2"),
])
def test_validate_names_field(field, value):
    with pytest.raises(InvalidDimension, match=field):
        validate_config(DEFAULT_CONFIG._replace(**{field: value}))


def test_offsets_may_be_negative():
    validate_config(DEFAULT_CONFIG._replace(icon_offset_x=-1.5, icon_offset_y=-0.2))


def test_offsets_must_be_finite():
    with pytest.raises(InvalidDimension, match="icon_offset_y"):
        validate_config(DEFAULT_CONFIG._replace(icon_offset_y=math.nan))


class TestConfigFromDict:
    def test_overrides(self):
        cfg = config_from_dict({"plan_width": 8.0, "page": "letter", "centering": "box-center"})
        assert cfg.plan_width == 8.0
        assert cfg.page is PageFormat.LETTER
        assert cfg.centering is CenteringPolicy.BOX_CENTER
        assert cfg.plan_height == DEFAULT_CONFIG.plan_height

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="unknown key"):
            config_from_dict({"roof_pitch": 30})

    def test_bad_centering(self):
        with pytest.raises(ValueError):
            config_from_dict({"centering": "middle"})


class TestLoadConfig:
    def test_reads_json(self, tmp_path):
        p = tmp_path / "plan.json"
        p.write_text(json.dumps({"plan_height": 3.5, "bathroom_swap_axes": False}))
        cfg = load_config(str(p))
        assert isinstance(cfg, PlanConfig)
        assert cfg.plan_height == 3.5
        assert cfg.bathroom_swap_axes is False

    def test_rejects_non_object(self, tmp_path):
        p = tmp_path / "plan.json"
        p.write_text("[1, 2]")
        with pytest.raises(ValueError, match="JSON object"):
            load_config(str(p))


class TestFieldTypes:
    @pytest.mark.parametrize("field,value", [
        ("page", 5), ("page", "A4"), ("centering", None),
        ("bathroom_swap_axes", "yes"), ("bedroom_door", 1),
    ])
    def test_non_length_fields_checked(self, field, value):
        with pytest.raises(ValueError, match=f"config: {field}"):
            validate_config(DEFAULT_CONFIG._replace(**{field: value}))

    @pytest.mark.parametrize("field", ["door_size", "icon_offset_x"])
    def test_bool_is_not_a_length(self, field):
        with pytest.raises(InvalidDimension, match=field):
            validate_config(DEFAULT_CONFIG._replace(**{field: True}))

    def test_from_dict_validates(self):
        with pytest.raises(ValueError, match="config: page"):
            config_from_dict({"page": 5})
        with pytest.raises(ValueError, match="config: centering"):
            config_from_dict({"centering": None})


class TestUnitTaggedLengths:
    def test_feet_and_inches(self):
        cfg = config_from_dict({
            "plan_width": {"value": 20, "unit": "ft"},
            "door_size": {"value": 36, "unit": "in"},
        })
        assert cfg.plan_width == pytest.approx(6.096)
        assert cfg.door_size == pytest.approx(0.9144)

    def test_unit_defaults_to_meters(self):
        assert config_from_dict({"plan_height": {"value": 3.5}}).plan_height == 3.5

    def test_negative_offset_in_feet(self):
        cfg = config_from_dict({"icon_offset_x": {"value": -2, "unit": "ft"}})
        assert cfg.icon_offset_x == pytest.approx(-0.6096)

    def test_unknown_unit(self):
        with pytest.raises(InvalidDimension, match="unknown unit"):
            config_from_dict({"door_size": {"value": 1, "unit": "yd"}})

    @pytest.mark.parametrize("value", [{"value": "3"}, {"value": 3, "scale": 2}, {"unit": "ft"}])
    def test_malformed_length_object(self, value):
        with pytest.raises(ValueError, match="door_size"):
            config_from_dict({"door_size": value})

    def test_icon_native_size_is_not_a_length(self):
        with pytest.raises(InvalidDimension, match="icon_native_size"):
            config_from_dict({"icon_native_size": {"value": 24, "unit": "in"}})
