import pytest

from rubrdesk.style import DARK_BLUE, geometry, rgb_hex


def test_rgb_hex_dark_blue():
    assert rgb_hex(*DARK_BLUE) == "#142850"


def test_rgb_hex_white():
    assert rgb_hex(255, 255, 255) == "#ffffff"


@pytest.mark.parametrize("triple", [(0, 0, 0), (1, 128, 254), (23, 44, 101)])
def test_rgb_hex_round_trip(triple):
    text = rgb_hex(*triple)
    assert text.startswith("#")
    assert len(text) == 7
    decoded = tuple(int(text[i:i + 2], 16) for i in (1, 3, 5))
    assert decoded == triple


@pytest.mark.parametrize("triple", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_rgb_hex_rejects_out_of_range(triple):
    with pytest.raises(ValueError):
        rgb_hex(*triple)


def test_geometry_format():
    assert geometry(1280, 720) == "1280x720"


def test_geometry_round_trip():
    width, height = geometry(700, 900).split("x")
    assert (int(width), int(height)) == (700, 900)


@pytest.mark.parametrize("size", [(0, 720), (1280, 0), (-5, 10)])
def test_geometry_rejects_non_positive(size):
    with pytest.raises(ValueError):
        geometry(*size)