"""Weather report retrieval, parsing and classification."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from urllib.error import HTTPError, URLError
from urllib.request import urlopen

DEFAULT_HOST = "restapi.amap.com"
DEFAULT_PATH = "/v3/weather/weatherInfo?"
DEFAULT_CITY = "110101"
HTTP_PORT = 80
REQUEST_TIMEOUT = 10.0

# Field position in the live report -> (English key, display label).
# Position 2 (the area code) is dropped.
_REPORT_FIELDS = {
    0: ("province", "省份"),
    1: ("city", "城市"),
    3: ("weather", "天气"),
    4: ("temperature", "温度"),
    5: ("winddirection", "风向"),
    6: ("windpower", "风力"),
}
_REPORT_FIELD_COUNT = 7
_SKIPPED_FIELD = 2


class WeatherError(Exception):
    """Raised when a weather report cannot be fetched."""


class WeatherCategory(enum.Enum):
    """The five broad kinds of weather the scene can display."""

    SUNNY = "晴天"
    OVERCAST = "阴天"
    RAIN = "雨天"
    SLEET = "雨雪天"
    SNOW = "雪天"


@dataclass(frozen=True)
class Precipitation:
    """Which weather effects are switched on."""

    rain: bool
    snow: bool
    sunny: bool


_S = WeatherCategory.SUNNY
_O = WeatherCategory.OVERCAST
_R = WeatherCategory.RAIN
_RS = WeatherCategory.SLEET
_SN = WeatherCategory.SNOW

WEATHER_CATEGORIES: dict[str, WeatherCategory] = {
    "晴朗": _S, "晴": _S, "少云": _S, "晴间多云": _S, "多云": _S,
    "阴": _O,
    "有风": _S, "平静": _S, "微风": _S, "和风": _S, "清风": _S,
    "强风/劲风": _S, "疾风": _S, "大风": _S, "烈风": _S, "风暴": _S,
    "狂爆风": _S, "飓风": _S, "热带风暴": _S,
    "霾": _O, "中度霾": _O, "重度霾": _O, "严重霾": _O,
    "雨天": _R, "阵雨": _R, "雷阵雨": _R, "雷阵雨并伴有冰雹": _R,
    "小雨": _R, "中雨": _R, "大雨": _R, "暴雨": _R, "大暴雨": _R,
    "特大暴雨": _R, "强阵雨": _R, "强雷阵雨": _R, "极端降雨": _R,
    "毛毛雨/细雨": _R, "雨": _R, "小雨-中雨": _R, "中雨-大雨": _R,
    "大雨-暴雨": _R, "暴雨-大暴雨": _R, "大暴雨-特大暴雨": _R,
    "雨雪天": _RS, "雨雪天气": _RS, "雨夹雪": _RS, "阵雨夹雪": _RS, "冻雨": _RS,
    "雪天": _SN, "雪": _SN, "阵雪": _SN, "小雪": _SN, "中雪": _SN,
    "大雪": _SN, "暴雪": _SN, "小雪-中雪": _SN, "中雪-大雪": _SN, "大雪-暴雪": _SN,
    "浮尘": _O, "扬沙": _O, "沙尘暴": _O, "强沙尘暴": _O, "龙卷风": _O,
    "雾": _O, "浓雾": _O, "强浓雾": _O, "轻雾": _O, "大雾": _O, "特强浓雾": _O,
    "热": _S, "冷": _O, "未知": _O,
}

_PRECIPITATION = {
    WeatherCategory.SUNNY: Precipitation(rain=False, snow=False, sunny=True),
    WeatherCategory.OVERCAST: Precipitation(rain=False, snow=False, sunny=True),
    WeatherCategory.RAIN: Precipitation(rain=True, snow=False, sunny=False),
    WeatherCategory.SLEET: Precipitation(rain=True, snow=True, sunny=False),
    WeatherCategory.SNOW: Precipitation(rain=False, snow=True, sunny=False),
}


def clean_weather_text(text: str) -> str:
    """Strip the "天气" label, colons and double quotes from a report line."""
    text = text.replace("天气", "")
    return "".join(ch for ch in text if ch not in ':"')


def classify_weather(text: str) -> WeatherCategory | None:
    """Return the category of a weather description, or None if unknown."""
    return WEATHER_CATEGORIES.get(clean_weather_text(text))


def precipitation_for(category: WeatherCategory | None) -> Precipitation | None:
    """Return the effects for a category; None leaves the effects unchanged."""
    if category is None:
        return None
    return _PRECIPITATION[category]


def parse_weather_report(body: str) -> list[str]:
    """Extract the six display lines from a live weather report body.

    The text after ``[{`` is split on commas; the first seven fields are
    taken, the third is dropped and each English key is relabelled.
    Missing fields come out as empty strings.
    """
    start = body.find("[")
    if start != -1:
        body = body[start + 2:]
    fields = body.split(",")
    lines = []
    for position in range(_REPORT_FIELD_COUNT):
        if position == _SKIPPED_FIELD:
            continue
        item = fields[position] if position < len(fields) else ""
        key, label = _REPORT_FIELDS[position]
        lines.append(item.replace(key, label, 1))
    return lines


def format_weather_report(lines: list[str], now: datetime) -> str:
    """Join report lines with a trailing "时间：HH:MM" line, quotes removed."""
    text = "".join(f"{line}\n" for line in lines)
    text += f"时间：{now:%H:%M}\n"
    return text.replace('"', "")


class WeatherClient:
    """Fetches the live weather report for one city."""

    def __init__(self, city: str, key: str, host: str = DEFAULT_HOST, path: str = DEFAULT_PATH):
        self.city = city or DEFAULT_CITY
        self.key = key
        self.host = host
        self.path = path

    def request_url(self) -> str:
        """The full URL queried for this city."""
        return f"http://{self.host}:{HTTP_PORT}{self.path}city={self.city}&key={self.key}"

    def fetch(self) -> list[str]:
        """Fetch and parse the report; raise WeatherError on failure."""
        try:
            with urlopen(self.request_url(), timeout=REQUEST_TIMEOUT) as response:
                status = response.status
                raw = response.read()
        except HTTPError as exc:
            raise WeatherError(f"weather request failed with status {exc.code}") from exc
        except (URLError, OSError) as exc:
            raise WeatherError(f"weather request failed: {exc}") from exc
        if status != 200:
            raise WeatherError(f"weather request failed with status {status}")
        return parse_weather_report(raw.decode("utf-8"))