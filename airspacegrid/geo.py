"""Conversion between geographic coordinates and local world coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS = 6378137.0
PI = 3.1415926
# World units are centimetres; geographic distances are metres.
UNITS_PER_METRE = 100.0


@dataclass(frozen=True)
class GeoOrigin:
    """A reference point tying a longitude/latitude to a world x/y position."""

    base_longitude: float = 0.0
    base_latitude: float = 0.0
    base_x: float = 0.0
    base_y: float = 0.0
    pi: float = PI

    def _radians_per_degree(self) -> float:
        return self.pi / 180.0

    def to_world(self, point: tuple[float, float, float]) -> tuple[float, float, float]:
        """Map ``(longitude, latitude, elevation)`` to world ``(x, y, z)``."""
        longitude, latitude, elevation = point
        k = self._radians_per_degree()
        x = (
            self.base_x
            + EARTH_RADIUS
            * math.cos(self.base_latitude * k)
            * (longitude - self.base_longitude)
            * k
            * UNITS_PER_METRE
        )
        y = self.base_y + EARTH_RADIUS * (latitude - self.base_latitude) * k * UNITS_PER_METRE
        z = elevation * UNITS_PER_METRE
        return (x, y, z)

    def to_geo(self, x: float, y: float) -> tuple[float, float]:
        """Estimate ``(longitude, latitude)`` of a world position.

        The base angles are fed to the cosine unconverted, and a longitude
        outside [-180, 180] has its sign flipped, as the viewer does.
        """
        k = self._radians_per_degree()
        longitude = self.base_longitude - (x - self.base_x) / UNITS_PER_METRE / (
            EARTH_RADIUS * math.cos(self.base_longitude) * k
        )
        if longitude > 180 or longitude < -180:
            longitude = -longitude
        latitude = self.base_latitude + (y - self.base_y) / UNITS_PER_METRE / (
            EARTH_RADIUS * math.cos(self.base_latitude) * k
        )
        return (longitude, latitude)


def heading_text(yaw: float) -> str:
    """Describe a camera yaw as a compass bearing (yaw 90 points north).

    Yaws that fall exactly on a quadrant boundary give an empty string.
    """
    if 90 < yaw < 180:
        return f"北偏东{yaw - 90:f}°"
    if 180 < yaw < 270:
        return f"南偏东{270 - yaw:f}°"
    if 270 < yaw < 360:
        return f"南偏西{yaw - 270:f}°"
    if 0 < yaw < 90:
        return f"北偏西{90 - yaw:f}°"
    return ""


def position_text(yaw: float, x: float, y: float, longitude: float, latitude: float) -> str:
    """Build the multi-line position readout shown to the user."""
    return (
        f"{heading_text(yaw)}\nx：{x:f}，y：{y:f}\n经度：{longitude:f}\n纬度：{latitude:f}"
    )