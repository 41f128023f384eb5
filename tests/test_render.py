import pytest

from classiclauncher.render import Render


@pytest.fixture
def render():
    r = Render()
    r.load_render(1280, 720)
    return r


def test_game_size(render):
    assert render.screen_width_game == 1280
    assert render.screen_height_game == 720


def test_same_size_mouse_is_identity(render):
    render.update(1280, 720, (100.0, 200.0))
    assert render.mouse_position() == pytest.approx((100.0, 200.0))
    assert render.scale == pytest.approx(1.0)


def test_center_maps_to_center_when_scaled(render):
    render.update(2560, 1440, (1280.0, 720.0))
    assert render.mouse_position() == pytest.approx((640.0, 360.0))


def test_center_maps_to_center_with_letterbox(render):
    render.update(1000, 1000, (500.0, 500.0))
    assert render.mouse_position() == pytest.approx((640.0, 360.0))


def test_mouse_is_clamped(render):
    render.update(1280, 720, (-50.0, -50.0))
    assert render.mouse_position() == (0.0, 0.0)
    render.update(1280, 720, (5000.0, 5000.0))
    assert render.mouse_position() == (1280.0, 720.0)


def test_destination_is_centered(render):
    render.update(1000, 1000, (0.0, 0.0))
    x, y, w, h = render.destination(1000, 1000)
    assert x == pytest.approx((1000 - w) / 2)
    assert y == pytest.approx((1000 - h) / 2)
    assert w / h == pytest.approx(1280 / 720)
    assert w <= 1000 and h <= 1000


def test_destination_fills_same_size(render):
    render.update(1280, 720, (0.0, 0.0))
    assert render.destination(1280, 720) == pytest.approx((0.0, 0.0, 1280.0, 720.0))


def test_render_scale(render):
    assert render.render_scale(2560, 1440) == pytest.approx((2.0, 2.0))


def test_without_aspect_ratio_scales_proportionally():
    r = Render(maintain_aspect_ratio=False)
    r.load_render(1280, 720)
    r.update(640, 360, (320.0, 180.0))
    assert r.scale == 1.0
    assert r.mouse_position() == pytest.approx((640.0, 360.0))


def test_unload(render):
    assert render.loaded
    render.unload()
    assert not render.loaded