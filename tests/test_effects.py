import pytest

from autohmjeum.effects import BackgroundColorFade, BackgroundFlash, Rgb, lerp


def _components(color):
    return (color.red, color.green, color.blue)


def test_lerp_endpoints():
    assert lerp(2.0, 8.0, 0.0) == 2.0
    assert lerp(2.0, 8.0, 1.0) == 8.0


def test_lerp_is_monotonic():
    values = [lerp(1.0, 3.0, t / 10) for t in range(11)]
    assert values == sorted(values)


def test_flash_inactive_returns_none():
    assert BackgroundFlash().update(1.0) is None


def test_flash_starts_at_flash_colour():
    flash = BackgroundFlash()
    color = Rgb(0.8, 0.4, 0.2)
    flash.start(color, Rgb(), 2.0, 10.0)
    assert flash.is_active
    result = flash.update(10.0)
    assert _components(result) == pytest.approx((0.8, 0.4, 0.2), abs=1e-6)


def test_flash_fades_toward_black():
    flash = BackgroundFlash()
    flash.start(Rgb(1.0, 1.0, 1.0), Rgb(), 2.0, 0.0)
    mid = flash.update(1.0)
    assert mid.red == pytest.approx(0.5)
    assert mid.red == mid.green == mid.blue
    later = flash.update(1.5)
    assert later.red < mid.red


def test_flash_ends_on_target():
    target = Rgb(0.1, 0.2, 0.3)
    flash = BackgroundFlash()
    flash.start(Rgb(1.0, 1.0, 1.0), target, 1.0, 0.0)
    assert flash.update(1.5) == target
    assert not flash.is_active
    assert flash.update(2.0) is None


def test_fade_inactive_returns_none():
    assert BackgroundColorFade().update(0.0) is None


def test_fade_zero_duration_gives_target_and_stays_active():
    target = Rgb(0.3, 0.6, 0.9)
    fade = BackgroundColorFade()
    fade.start(Rgb(), target, 0.0, 5.0)
    assert fade.update(5.0) == target
    assert fade.is_active


def test_fade_starts_at_start_colour():
    start = Rgb(0.2, 0.5, 0.7)
    fade = BackgroundColorFade()
    fade.start(start, Rgb(0.9, 0.1, 0.1), 4.0, 0.0)
    result = fade.update(0.0)
    assert _components(result) == pytest.approx((0.2, 0.5, 0.7), abs=1e-6)
    assert fade.is_active


def test_fade_ends_on_target():
    target = Rgb(0.9, 0.1, 0.1)
    fade = BackgroundColorFade()
    fade.start(Rgb(0.2, 0.5, 0.7), target, 1.0, 0.0)
    assert fade.update(2.0) == target
    assert not fade.is_active


def test_fade_between_greys_stays_grey_and_between():
    fade = BackgroundColorFade()
    fade.start(Rgb(0.0, 0.0, 0.0), Rgb(1.0, 1.0, 1.0), 2.0, 0.0)
    mid = fade.update(1.0)
    assert mid.red == pytest.approx(mid.green) == pytest.approx(mid.blue)
    assert 0.0 < mid.red < 1.0


def test_fade_takes_short_way_around_hue():
    fade = BackgroundColorFade()
    fade.start(Rgb(1.0, 0.0, 0.2), Rgb(1.0, 0.2, 0.0), 2.0, 0.0)
    mid = fade.update(1.0)
    assert mid.red > mid.green
    assert mid.red > mid.blue
    assert mid.green < 0.2
    assert mid.blue < 0.2