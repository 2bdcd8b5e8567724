"""Decoding of the JSON action messages sent to the viewer."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Union

_NUMBER_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class MessageError(ValueError):
    """Raised when a message is not a JSON object."""


@dataclass(frozen=True)
class WeatherUpdate:
    """Weather to apply to the rectangle between two (longitude, latitude) corners."""

    weather: str = ""
    wind_direction: str = ""
    wind_power: float = 0.0
    corner_a: tuple[float, float] = (0.0, 0.0)
    corner_b: tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class PointFileUpdate:
    """Geographic placement of a point-cloud file."""

    filename: str = ""
    longitude: float = 0.0
    latitude: float = 0.0
    elevation: float = 0.0


@dataclass(frozen=True)
class AirlineUpdate:
    """A named flight line: its raw locates as JSON and the parsed points."""

    name: str = ""
    locates_json: str = "[]"
    points: list[tuple[float, float, float]] = field(default_factory=list)


@dataclass(frozen=True)
class LocateRequest:
    """A request for the airspace data around a location."""

    longitude: float = 0.0
    latitude: float = 0.0
    elevation: float = 0.0


Message = Union[WeatherUpdate, PointFileUpdate, AirlineUpdate, LocateRequest]


def _atof(text: str) -> float:
    match = _NUMBER_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _as_number(value: Any) -> float:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return _atof(value)
    return 0.0


def _as_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return ""


def _object(data: dict, key: str) -> dict | None:
    value = data.get(key)
    return value if isinstance(value, dict) else None


def _weather(data: dict) -> WeatherUpdate:
    corners = []
    for key in ("locate1", "locate2"):
        locate = _object(data, key) or {}
        corners.append((_as_number(locate.get("lon")), _as_number(locate.get("lat"))))
    return WeatherUpdate(
        weather=_as_string(data.get("weather", "")),
        wind_direction=_as_string(data.get("wind_direction", "")),
        wind_power=_as_number(data.get("wind_power", 0)),
        corner_a=corners[0],
        corner_b=corners[1],
    )


def _point_file(data: dict) -> PointFileUpdate:
    locate = _object(data, "locate") or {}
    return PointFileUpdate(
        filename=_as_string(data.get("filename", "")),
        longitude=_as_number(locate.get("lon")),
        latitude=_as_number(locate.get("lat")),
        elevation=_as_number(locate.get("ele")),
    )


def _airline(data: dict) -> AirlineUpdate | None:
    locates = data.get("locates")
    if not isinstance(locates, list):
        return None
    points = [
        (_as_number(entry[0]), _as_number(entry[1]), _as_number(entry[2]))
        for entry in locates
        if isinstance(entry, list) and len(entry) >= 3
    ]
    return AirlineUpdate(
        name=_as_string(data.get("linename", "")),
        locates_json=json.dumps(locates, ensure_ascii=False),
        points=points,
    )


def parse_message(text: str) -> list[Message]:
    """Decode one action message into the updates or requests it carries.

    An ``add`` action may carry weather, point-file and airline sections,
    returned in that order; a ``get`` action carries a locate request.
    Messages with no or an unknown action yield an empty list.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MessageError(f"message is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise MessageError("message is not a JSON object")
    action = data.get("action")
    messages: list[Message] = []
    if action == "add":
        weather = _object(data, "weatherdata")
        if weather is not None:
            messages.append(_weather(weather))
        point_file = _object(data, "Point_file")
        if point_file is not None:
            messages.append(_point_file(point_file))
        airline = _object(data, "Airline")
        if airline is not None:
            update = _airline(airline)
            if update is not None:
                messages.append(update)
    elif action == "get":
        locate = _object(data, "locate")
        if locate is not None:
            messages.append(
                LocateRequest(
                    longitude=_as_number(locate.get("lon")),
                    latitude=_as_number(locate.get("lat")),
                    elevation=_as_number(locate.get("ele")),
                )
            )
    return messages