import pytest

from wallpaper_parallax.geometry import (
    center_position, fit_to_size, ideal_crop_size, min_zoom, resolve_crop_rect,
    travel_ratio, visible_rect,
)
from wallpaper_parallax.models import Point, Rect, Size


# -- travel_ratio -------------------------------------------------------------

def test_travel_ratio_calibration_points() -> None:
    assert travel_ratio(1600, 1000) == 1.2
    assert travel_ratio(1000, 1600) == 1.5


def test_travel_ratio_is_affine_in_aspect_ratio() -> None:
    low, mid, high = travel_ratio(800, 1000), travel_ratio(1000, 1000), travel_ratio(1200, 1000)
    assert mid == pytest.approx((low + high) / 2)


def test_travel_ratio_extrapolates_without_clamping() -> None:
    assert travel_ratio(2000, 1000) < 1.2
    assert travel_ratio(500, 1000) > 1.5


def test_travel_ratio_rejects_zero_height() -> None:
    with pytest.raises(ValueError):
        travel_ratio(1000, 0)


# -- ideal_crop_size ----------------------------------------------------------

def test_ideal_crop_size_handheld_uses_two_screen_span() -> None:
    assert ideal_crop_size(1440, 2560, False) == Size(2880, 2560)


def test_ideal_crop_size_handheld_is_never_narrower_than_long_side() -> None:
    assert ideal_crop_size(1080, 2340, False) == Size(2340, 2340)


def test_ideal_crop_size_large_screen_uses_travel_ratio() -> None:
    # 2560x1600 is exactly 16:10, so the travel ratio is 1.2
    assert ideal_crop_size(1600, 2560, True) == Size(3072, 2560)


def test_ideal_crop_size_rejects_zero_dimension() -> None:
    with pytest.raises(ValueError):
        ideal_crop_size(0, 2560, True)


# -- center_position ----------------------------------------------------------

def test_center_position_centers() -> None:
    assert center_position(Size(100, 200), Size(50, 100), False, False) == Point(25, 50)


def test_center_position_start_aligned_rtl_pins_right() -> None:
    assert center_position(Size(100, 200), Size(50, 100), True, True) == Point(50, 50)


def test_center_position_start_aligned_ltr_pins_left() -> None:
    assert center_position(Size(100, 200), Size(50, 100), True, False) == Point(0, 50)


def test_center_position_centering_ignores_direction() -> None:
    assert center_position(Size(100, 200), Size(50, 100), False, True) == Point(25, 50)


def test_center_position_rounds_half_up() -> None:
    assert center_position(Size(101, 201), Size(50, 100)) == Point(26, 51)


def test_center_position_rejects_oversized_inner() -> None:
    with pytest.raises(ValueError):
        center_position(Size(100, 200), Size(101, 100), False, False)
    with pytest.raises(ValueError):
        center_position(Size(100, 200), Size(50, 201), False, False)


# -- min_zoom / visible_rect --------------------------------------------------

def test_min_zoom_width_binds() -> None:
    assert min_zoom(Size(1000, 2000), Size(500, 500)) == 0.5


def test_min_zoom_height_binds() -> None:
    assert min_zoom(Size(2000, 1000), Size(500, 500)) == 0.5


def test_min_zoom_equal_aspect_takes_height_branch() -> None:
    assert min_zoom(Size(1000, 500), Size(2000, 1000)) == 2.0


def test_min_zoom_covers_inner() -> None:
    cases = [
        (Size(1000, 2000), Size(500, 500)),
        (Size(4000, 3000), Size(1080, 2340)),
        (Size(1920, 1080), Size(2560, 1600)),
        (Size(333, 777), Size(1234, 567)),
    ]
    for outer, inner in cases:
        zoom = min_zoom(outer, inner)
        assert inner.width <= outer.width * zoom + 1e-9
        assert inner.height <= outer.height * zoom + 1e-9
        binding = (
            outer.width * zoom == pytest.approx(inner.width)
            or outer.height * zoom == pytest.approx(inner.height)
        )
        assert binding


def test_min_zoom_rejects_degenerate_sizes() -> None:
    with pytest.raises(ValueError):
        min_zoom(Size(0, 100), Size(50, 50))
    with pytest.raises(ValueError):
        min_zoom(Size(100, 100), Size(50, 0))


def test_visible_rect_width_binds() -> None:
    assert visible_rect(Size(1000, 2000), Size(500, 500)) == Rect(0, 500, 1000, 1500)


def test_visible_rect_height_binds() -> None:
    assert visible_rect(Size(2000, 1000), Size(500, 500)) == Rect(500, 0, 1500, 1000)


def test_visible_rect_equal_aspect_spans_everything() -> None:
    assert visible_rect(Size(1000, 500), Size(2000, 1000)) == Rect(0, 0, 1000, 500)


def test_visible_rect_truncates_edges() -> None:
    # center is 1000.5; both edges land on .5 and are truncated, not rounded
    assert visible_rect(Size(1000, 2001), Size(500, 500)) == Rect(0, 500, 1000, 1500)


# -- resolve_crop_rect --------------------------------------------------------

def test_resolve_crop_rect_ltr_grows_right() -> None:
    crop = resolve_crop_rect(
        Size(2000, 1500), Rect(100, 50, 1180, 1250), 1.0,
        Size(1080, 1200), Size(1600, 1400), is_rtl=False,
    )
    # only 50px free above, so vertical growth is limited to 50 on both sides
    assert crop == Rect(100, 0, 1700, 1300)


def test_resolve_crop_rect_rtl_grows_left_and_clamps() -> None:
    crop = resolve_crop_rect(
        Size(2000, 1500), Rect(100, 50, 1180, 1250), 1.0,
        Size(1080, 1200), Size(1600, 1400), is_rtl=True,
    )
    assert crop == Rect(0, 0, 1180, 1300)


def test_resolve_crop_rect_direction_only_changes_width() -> None:
    args = (Size(1000, 800), Rect(100, 100, 500, 633), 1.5, Size(600, 800), Size(1000, 1000))
    ltr = resolve_crop_rect(*args, is_rtl=False)
    rtl = resolve_crop_rect(*args, is_rtl=True)
    assert ltr == Rect(150, 50, 1150, 1050)
    assert rtl == Rect(0, 50, 750, 1050)
    assert (ltr.top, ltr.bottom) == (rtl.top, rtl.bottom)


def test_resolve_crop_rect_vertical_growth_limited_by_bottom() -> None:
    crop = resolve_crop_rect(
        Size(2000, 1300), Rect(100, 100, 1180, 1300), 1.0,
        Size(1080, 1200), Size(1600, 1400), is_rtl=False,
    )
    # 100px free above but none below, so neither edge grows
    assert crop == Rect(100, 100, 1700, 1300)
    assert Rect(0, 0, 2000, 1300).contains(crop)


def test_resolve_crop_rect_clamps_to_scaled_bounds() -> None:
    crop = resolve_crop_rect(
        Size(1000, 800), Rect(300, 0, 700, 800), 1.0,
        Size(400, 800), Size(1200, 1000), is_rtl=False,
    )
    # no room above, so no vertical growth at all
    assert crop == Rect(300, 0, 1000, 800)
    assert Rect(0, 0, 1000, 800).contains(crop)


def test_resolve_crop_rect_truncates_scaled_values() -> None:
    crop = resolve_crop_rect(
        Size(1001, 801), Rect(3, 3, 100, 100), 1.25,
        Size(100, 100), Size(100, 100), is_rtl=False,
    )
    # scroll 3 * 1.25 = 3.75 -> 3
    assert crop == Rect(3, 3, 103, 103)


def test_resolve_crop_rect_rejects_non_positive_zoom() -> None:
    with pytest.raises(ValueError):
        resolve_crop_rect(Size(100, 100), Rect(0, 0, 10, 10), 0.0, Size(10, 10), Size(20, 20))


# -- fit_to_size --------------------------------------------------------------

def test_fit_to_size_scales_up() -> None:
    assert fit_to_size(Rect(0, 0, 200, 100), 400, 400) == Rect(0, 0, 400, 200)


def test_fit_to_size_is_idempotent() -> None:
    once = fit_to_size(Rect(0, 0, 200, 100), 400, 400)
    assert fit_to_size(once, 400, 400) == once


def test_fit_to_size_scales_every_coordinate() -> None:
    assert fit_to_size(Rect(10, 20, 110, 70), 200, 50) == Rect(20, 40, 220, 140)


def test_fit_to_size_rounds_half_up() -> None:
    assert fit_to_size(Rect(0, 0, 3, 2), 4, 4) == Rect(0, 0, 4, 3)


def test_fit_to_size_empty_rect_is_noop() -> None:
    empty = Rect(10, 10, 10, 50)
    assert fit_to_size(empty, 400, 400) is empty
    assert fit_to_size(Rect(), 1, 1) == Rect()


def test_fit_to_size_returns_new_value() -> None:
    original = Rect(0, 0, 200, 100)
    fit_to_size(original, 400, 400)
    assert original == Rect(0, 0, 200, 100)
