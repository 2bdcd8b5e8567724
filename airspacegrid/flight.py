"""Playback of a drone moving along a list of waypoints."""

from __future__ import annotations

import math
from collections.abc import Iterable

Vector = tuple[float, float, float]

DEFAULT_SPEED = 100.0
_SAFE_NORMAL_TOLERANCE = 1e-8


def _safe_normal(v: Vector) -> Vector:
    squared = v[0] * v[0] + v[1] * v[1] + v[2] * v[2]
    if squared <= _SAFE_NORMAL_TOLERANCE:
        return (0.0, 0.0, 0.0)
    length = math.sqrt(squared)
    return (v[0] / length, v[1] / length, v[2] / length)


class FlightPlayback:
    """Moves a position from waypoint to waypoint at a constant speed."""

    def __init__(self, waypoints: Iterable[Vector], speed: float = DEFAULT_SPEED):
        self.waypoints: list[Vector] = [tuple(p) for p in waypoints]
        if not self.waypoints:
            raise ValueError("a flight needs at least one waypoint")
        self.speed = speed
        self.position: Vector = self.waypoints[0]
        self.moving = True

    def step(self, dt: float) -> Vector:
        """Advance by ``dt`` seconds and return the new position.

        Reaching a waypoint snaps to it and drops the previous one; the
        flight stops when a single waypoint remains.
        """
        if not (self.moving and len(self.waypoints) > 1):
            return self.position
        target = self.waypoints[1]
        delta = tuple(t - p for t, p in zip(target, self.position))
        direction = _safe_normal(delta)
        distance = math.dist(self.position, target)
        travel = self.speed * dt
        if distance > travel:
            self.position = tuple(p + d * travel for p, d in zip(self.position, direction))
        else:
            self.position = target
            self.waypoints.pop(0)
        if len(self.waypoints) == 1:
            self.moving = False
        return self.position