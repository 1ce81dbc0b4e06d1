from dataclasses import fields

import pytest

from whirligig.config import PRESETS
from whirligig.containers.parameters import (
    FAMILY_FIELDS, BladeParameters, PinHole, apply_preset, validate_parameters,
)


def _assert_params_close(a: BladeParameters, b: BladeParameters) -> None:
    for f in fields(BladeParameters):
        va, vb = getattr(a, f.name), getattr(b, f.name)
        if isinstance(va, float):
            assert va == pytest.approx(vb, rel=1e-12, abs=1e-12), f.name
        elif isinstance(va, PinHole):
            assert va.present == vb.present
            assert va.diameter == pytest.approx(vb.diameter)
            assert va.offset_from_hub == pytest.approx(vb.offset_from_hub)
        else:
            assert va == vb, f.name


def test_defaults_are_leaf_preset(leaf_params):
    assert leaf_params.tip_style == "leaf"
    for key, value in PRESETS["leaf"].items():
        assert getattr(leaf_params, key) == value
    assert leaf_params.exposed_length == 10.5
    assert leaf_params.tab_length == 1.0
    assert leaf_params.tab_width == 2.25


@pytest.mark.parametrize("style", ["leaf", "rounded"])
def test_mm_round_trip(style):
    p = BladeParameters.from_preset(style, kerf_offset=0.007,
                                    pin_hole=PinHole(True, 0.2, 0.4))
    back = BladeParameters.from_display(p.to_display("mm"), "mm")
    _assert_params_close(p, back)


def test_to_display_converts_lengths_only(leaf_params, rounded_params):
    d = leaf_params.to_display("mm")
    assert d["exposed_length"] == pytest.approx(266.7)
    assert d["pin_hole"]["diameter"] == pytest.approx(3.175)
    # leaf tip_radius is a bluntness fraction, not a length
    assert d["tip_radius"] == 0.65
    assert d["width_position"] == 0.6
    assert rounded_params.to_display("mm")["tip_radius"] == pytest.approx(12.7)


def test_style_switch_resets_family_fields():
    custom = BladeParameters(exposed_length=12.0, tab_length=1.5, tab_width=2.0,
                             taper_sharpness=0.9, width_position=0.3, tip_radius=0.1)
    switched = apply_preset(custom, "rounded")
    assert switched.tip_style == "rounded"
    for key in FAMILY_FIELDS:
        assert getattr(switched, key) == PRESETS["rounded"][key]
    assert (switched.exposed_length, switched.tab_length, switched.tab_width) == (12.0, 1.5, 2.0)
    assert switched.pin_hole == custom.pin_hole
    assert switched.with_style("leaf").taper_sharpness == PRESETS["leaf"]["taper_sharpness"]


def test_unknown_style_preset_raises(leaf_params):
    with pytest.raises(ValueError):
        apply_preset(leaf_params, "paddle")
    with pytest.raises(ValueError):
        BladeParameters.from_preset("paddle")


def test_parameters_are_hashable_values():
    assert BladeParameters() == BladeParameters()
    assert hash(BladeParameters()) == hash(BladeParameters())
    assert BladeParameters(exposed_length=9.0) != BladeParameters()


def test_scaled_keeps_fractions(leaf_params, rounded_params):
    s = leaf_params.scaled(2.0)
    assert s.exposed_length == pytest.approx(21.0)
    assert s.pin_hole.offset_from_hub == pytest.approx(1.0)
    assert s.tip_radius == leaf_params.tip_radius
    assert s.width_position == leaf_params.width_position
    assert rounded_params.scaled(2.0).tip_radius == pytest.approx(1.0)


def test_validate_flags_out_of_range():
    assert validate_parameters(BladeParameters()) == []
    bad = BladeParameters(exposed_length=0.0, tab_width=-1.0, width_position=1.2, taper_sharpness=-0.1)
    problems = validate_parameters(bad)
    assert len(problems) == 4
    assert any("exposed_length" in msg for msg in problems)
    assert any("tab_width" in msg for msg in problems)


def test_from_display_rejects_invalid():
    with pytest.raises(ValueError, match="exposed_length"):
        BladeParameters.from_display({"exposed_length": -3.0}, "in")
    # validation is opt-out for callers that range-check themselves
    p = BladeParameters.from_display({"exposed_length": -3.0}, "in", validate=False)
    assert p.exposed_length == -3.0
