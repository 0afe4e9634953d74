import numpy as np
import pytest

from mandelzoom.base import Region, build_palette
from mandelzoom.mandel_common import escape_time, pixel_to_complex
from mandelzoom.mandel_parfor import render_view
from mandelzoom.renderer import Renderer
from mandelzoom.session import home_region

WIDTH, HEIGHT = 64, 48


@pytest.fixture
def home():
    return home_region(WIDTH, HEIGHT, -2.0, 1.25, -1.25)


def test_buffer_shape(home):
    buf = render_view(WIDTH, HEIGHT, home, 50, build_palette(50))

    assert buf.shape == (HEIGHT, WIDTH, 4)
    assert buf.dtype == np.uint8
    assert np.all(buf[:, :, 3] == 255)


def test_render_is_deterministic(home):
    palette = build_palette(100)

    a = render_view(WIDTH, HEIGHT, home, 100, palette)
    b = render_view(WIDTH, HEIGHT, home, 100, palette)

    assert np.array_equal(a, b)


def test_pixels_match_mapper_and_evaluator(home):
    palette = build_palette(120)
    buf = render_view(WIDTH, HEIGHT, home, 120, palette)

    for (x, y) in ((0, 0), (5, 7), (32, 24), (40, 10), (63, 47), (20, 30)):
        c = pixel_to_complex(x, y, WIDTH, HEIGHT, home)
        assert np.array_equal(buf[y, x], palette[escape_time(c, 120)])


def test_inside_points_are_black():
    # a tiny region around the origin never escapes
    region = Region(-0.01, -0.01, 0.01, 0.01)
    buf = render_view(8, 8, region, 60, build_palette(60))

    assert np.all(buf == np.array((0, 0, 0, 255), dtype=np.uint8))


def test_fixed_cap_with_longer_palette(home):
    # iterating at 200 with a palette sized for 250 never reaches the tail
    palette = build_palette(250)
    buf = render_view(WIDTH, HEIGHT, home, 200, palette)

    assert np.any(np.all(buf == palette[199], axis=2))
    assert not np.any(np.all(buf == palette[249], axis=2))


def test_palette_too_short(home):
    with pytest.raises(ValueError):
        render_view(WIDTH, HEIGHT, home, 100, build_palette(50))


def test_rows_by_band(home):
    palette = build_palette(80)
    whole = render_view(WIDTH, HEIGHT, home, 80, palette)

    output = np.zeros((HEIGHT, WIDTH, 4), dtype=np.uint8)
    for start in range(0, HEIGHT, 10):
        render_view(WIDTH, HEIGHT, home, 80, palette,
                    seq=(start, min(start + 10, HEIGHT)), output=output)

    assert np.array_equal(whole, output)


@pytest.fixture
def renderer():
    r = Renderer(WIDTH, HEIGHT, num_chunks=4)
    yield r
    r.exit()


def test_renderer_delivers_frame(renderer, home):
    palette = build_palette(60)
    generation = renderer.submit(home, 60, palette)

    result = renderer.wait(timeout=60)

    assert result is not None
    assert result[0] == generation
    assert np.array_equal(result[1], render_view(WIDTH, HEIGHT, home, 60, palette))
    assert renderer.poll() is None


def test_renderer_last_request_wins(renderer, home):
    zoomed = Region(-0.8, 0.05, -0.7, 0.125)
    first = renderer.submit(home, 60, build_palette(60))
    second = renderer.submit(zoomed, 110, build_palette(110))

    result = renderer.wait(timeout=60)

    assert second == first + 1
    assert result[0] == second
    assert np.array_equal(
        result[1], render_view(WIDTH, HEIGHT, zoomed, 110, build_palette(110)))
    assert renderer.poll() is None


def test_renderer_rejects_short_palette(renderer, home):
    with pytest.raises(ValueError):
        renderer.submit(home, 100, build_palette(50))


def test_renderer_survives_failed_job(renderer, home, capsys):
    # float colors pass the length check but not the kernel signature
    bad_palette = np.zeros((60, 4), dtype=np.float64)
    renderer.submit(home, 60, bad_palette)

    assert renderer.wait(timeout=60) is None
    assert renderer.idle.is_set()
    assert "[render] error" in capsys.readouterr().err

    palette = build_palette(60)
    generation = renderer.submit(home, 60, palette)
    result = renderer.wait(timeout=60)

    assert result is not None
    assert result[0] == generation
    assert np.array_equal(result[1], render_view(WIDTH, HEIGHT, home, 60, palette))
