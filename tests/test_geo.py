import pytest

from airspacegrid.geo import EARTH_RADIUS, PI, GeoOrigin, heading_text, position_text


def test_to_world_at_origin_returns_base_position():
    origin = GeoOrigin(base_longitude=116.4, base_latitude=39.9, base_x=500.0, base_y=-250.0)
    x, y, z = origin.to_world((116.4, 39.9, 0.0))
    assert x == pytest.approx(500.0)
    assert y == pytest.approx(-250.0)
    assert z == 0.0


def test_to_world_is_symmetric_around_origin():
    origin = GeoOrigin(base_longitude=10.0, base_latitude=20.0, base_x=1000.0, base_y=2000.0)
    east = origin.to_world((10.5, 20.5, 3.0))
    west = origin.to_world((9.5, 19.5, 3.0))
    assert east[0] - 1000.0 == pytest.approx(1000.0 - west[0])
    assert east[1] - 2000.0 == pytest.approx(2000.0 - west[1])
    assert east[2] == west[2]


def test_to_world_increases_with_longitude_and_latitude():
    origin = GeoOrigin(base_longitude=100.0, base_latitude=30.0)
    low = origin.to_world((100.1, 30.1, 0.0))
    high = origin.to_world((100.2, 30.2, 0.0))
    assert high[0] > low[0]
    assert high[1] > low[1]


def test_to_world_one_degree_latitude_on_zero_origin():
    origin = GeoOrigin()
    _, y, _ = origin.to_world((0.0, 1.0, 0.0))
    assert y == pytest.approx(EARTH_RADIUS * PI / 180 * 100)


def test_to_geo_at_base_position():
    origin = GeoOrigin(base_longitude=12.0, base_latitude=34.0, base_x=7.0, base_y=8.0)
    assert origin.to_geo(7.0, 8.0) == pytest.approx((12.0, 34.0))


def test_to_geo_moving_east_lowers_longitude():
    origin = GeoOrigin()
    one_degree = EARTH_RADIUS * PI / 180 * 100
    longitude, latitude = origin.to_geo(one_degree, 0.0)
    assert longitude == pytest.approx(-1.0)
    assert latitude == pytest.approx(0.0)


def test_to_geo_flips_out_of_range_longitude():
    origin = GeoOrigin()
    one_degree = EARTH_RADIUS * PI / 180 * 100
    longitude, _ = origin.to_geo(one_degree * 200, 0.0)
    assert longitude > 180


def test_heading_text_quadrants():
    assert heading_text(120.0).startswith("北偏东")
    assert heading_text(200.0).startswith("南偏东")
    assert heading_text(300.0).startswith("南偏西")
    assert heading_text(45.0).startswith("北偏西")
    assert heading_text(120.0).endswith("°")


def test_heading_text_value():
    assert heading_text(120.0) == "北偏东30.000000°"


@pytest.mark.parametrize("yaw", [0.0, 90.0, 180.0, 270.0, 360.0])
def test_heading_text_boundaries_are_empty(yaw):
    assert heading_text(yaw) == ""


def test_position_text_layout():
    text = position_text(45.0, 1.5, 2.0, 3.0, 4.0)
    lines = text.split("\n")
    assert len(lines) == 4
    assert lines[0] == heading_text(45.0)
    assert lines[1].startswith("x：1.5")
    assert lines[2].startswith("经度：3.0")
    assert lines[3].startswith("纬度：4.0")