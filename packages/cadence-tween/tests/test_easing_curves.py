"""Tests for easing curves and value effects."""

import pytest

from cadence_tween import EASINGS, make_effect, resolve_easing


@pytest.mark.parametrize("name", sorted(EASINGS))
def test_easing_endpoints(name):
    fn = EASINGS[name]
    assert fn(0.0) == pytest.approx(0.0, abs=1e-9)
    assert fn(1.0) == pytest.approx(1.0, abs=1e-9)


def test_linear_is_identity():
    assert EASINGS["linear"](0.25) == 0.25


def test_ease_in_slower_than_linear_at_midpoint():
    assert EASINGS["ease_in"](0.5) < 0.5
    assert EASINGS["ease_out"](0.5) > 0.5
    assert EASINGS["ease_in_out"](0.5) == pytest.approx(0.5)


def test_resolve_easing_by_name():
    assert resolve_easing("ease_out") is EASINGS["ease_out"]


def test_resolve_easing_passes_callables_through():
    def custom(t):
        return t ** 3

    assert resolve_easing(custom) is custom


def test_resolve_unknown_easing_raises():
    with pytest.raises(KeyError):
        resolve_easing("wobble")


def test_make_effect_interpolates_between_values():
    effect = make_effect("linear", 10, 20)
    assert effect(0.0) == 10
    assert effect(0.5) == 15
    assert effect(1.0) == 20


def test_make_effect_descending_range():
    effect = make_effect("linear", 100, 0)
    assert effect(0.25) == 75


def test_make_effect_with_custom_easing():
    effect = make_effect(lambda t: t * t, 0, 100)
    assert effect(0.5) == pytest.approx(25)
