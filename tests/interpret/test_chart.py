import pytest

from tests.helpers.mock_backend import MockedBackend
from whisker.interpret.chart import as_axis, Cartesian2d, CategoryAxis, LinearAxis


def test_linear_axis_map():
    axis = LinearAxis(0, 10)
    assert axis.map(0, (100, 200)) == 100
    assert axis.map(2.5, (100, 200)) == 125
    assert axis.map(10, (200, 100)) == 100


def test_linear_axis_degenerate_range():
    with pytest.raises(ValueError, match="start != end"):
        LinearAxis(3, 3)


def test_category_axis_band_centres():
    axis = CategoryAxis(["a", "b", "c", "d"])
    assert [axis.map(k, (0, 400)) for k in "abcd"] == [50, 150, 250, 350]


def test_category_axis_unknown_key():
    with pytest.raises(ValueError, match="Unknown key 'z'"):
        CategoryAxis(["a"]).map("z", (0, 10))


@pytest.mark.parametrize("keys", [[], ["a", "a"]])
def test_category_axis_invalid_keys(keys):
    with pytest.raises(ValueError, match="CategoryAxis"):
        CategoryAxis(keys)


def test_as_axis():
    linear = LinearAxis(0, 1)
    assert as_axis(linear) is linear
    assert isinstance(as_axis((0, 5)), LinearAxis)
    assert isinstance(as_axis(["x", "y"]), CategoryAxis)


def test_translate_flips_y():
    coord = Cartesian2d((0.0, 10.0), (0.0, 10.0), ((0, 100), (0, 50)))
    assert coord.translate((0, 0)) == (0, 50)
    assert coord.translate((10, 10)) == (100, 0)


def test_translate_points_preserves_order():
    coord = Cartesian2d((0.0, 4.0), (0.0, 4.0), ((0, 4), (0, 4)))
    points = [(1, 3), (0, 0), (4, 2)]
    assert coord.translate_points(points) == [(1, 1), (0, 4), (4, 2)]


def test_on_backend_with_margin():
    coord = Cartesian2d.on(MockedBackend(300, 200), (0, 1), (0, 1), margin=20)
    assert coord.pixel_range == ((20, 280), (20, 180))
