# airspacegrid

Building blocks for modelling a digital airspace in pure Python. The package uses only the standard library.

| Module | What it does |
| --- | --- |
| `airspacegrid.airgrid` | A lattice of cubic cells. Cells that hold obstacles are refined into an octree. |
| `airspacegrid.geo` | Longitude/latitude/elevation to world coordinates and back, plus the heading and position readout text. |
| `airspacegrid.weather` | Parses, classifies and fetches live weather reports. |
| `airspacegrid.ply` | Reads PLY meshes, ASCII or binary, into vertex and index lists. |
| `airspacegrid.objconvert` | Converts PLY meshes to OBJ text. |
| `airspacegrid.paths` | Reads `x y z` flight paths and splits them into segments. |
| `airspacegrid.flight` | Plays back a flight along waypoints at constant speed. |
| `airspacegrid.streaming` | Decides which map blocks around a camera are loaded and which are hidden. |
| `airspacegrid.messages` | Decodes JSON action messages. |
| `airspacegrid.server` | An HTTP endpoint that receives those messages. |

## Airspace grid

```python
from airspacegrid.airgrid import AirGrid, CellState, Obstacle

grid = AirGrid(dimensions=(5, 5, 5), origin=(0.0, 0.0, 0.0), grid_size=20000.0, max_level=6)

def probe(center, half_extent):
    # Return the obstacles overlapping the cube; tagged ones count as towers.
    return [Obstacle("tower-01", tags=("tower",))] if center[2] < 10000 else []

grid.update(probe)

for cell in grid.cells():              # top-level cells, x then y then z
    for block in cell.walk():          # the cell and all its descendants
        if block.state is CellState.BLOCKED:
            print(block.id, block.center, block.size, block.tower_id)
```

Each top-level cell is passed to `detect_obstacles(cell, probe)`. A cell with no overlaps stays `FREE`. A cell with overlaps at `max_level` becomes `BLOCKED`. Above `max_level` it becomes `MIXED`, is split into eight children with `subdivide(cell)`, and each child is checked in turn. Ids are handed out in creation order. `grid_to_world(coord)` gives the centre of a top-level cell.

`set_weather(corner_a, corner_b, weather, wind_direction, wind_power)` truncates the x and y of the two world corners to lattice indices. It updates every cell in those columns and returns the updated cells. An index outside the lattice raises `IndexError`.

## Coordinates

```python
from airspacegrid.geo import GeoOrigin, heading_text, position_text

origin = GeoOrigin(base_longitude=116.39, base_latitude=39.9, base_x=0.0, base_y=0.0)
x, y, z = origin.to_world((116.40, 39.91, 50.0))   # world units are centimetres
lon, lat = origin.to_geo(x, y)
```

`to_geo` is a rough inverse, not an exact one. It passes the base angles to the cosine without converting them to radians, and it flips the sign of a longitude outside [-180, 180]. `heading_text(yaw)` describes a camera yaw as a compass bearing, with yaw 90 pointing north. `position_text(yaw, x, y, longitude, latitude)` builds the multi-line readout.

## Weather

```python
from airspacegrid.weather import WeatherClient, classify_weather, precipitation_for

category = classify_weather('"天气":"小雨"')     # WeatherCategory.RAIN
effects = precipitation_for(category)            # Precipitation(rain=True, snow=False, sunny=False)

client = WeatherClient("110101", key="placeholder")
lines = client.fetch()                           # raises WeatherError on failure
```

- `parse_weather_report(body)` turns a report body into six labelled lines.
- `format_weather_report(lines, now)` joins them and appends a `时间：HH:MM` line.
- `clean_weather_text(text)` strips the label, colons and quotes before classification.
- Unknown descriptions classify as `None`. `precipitation_for(None)` returns `None`.

## Point clouds

```python
from airspacegrid.ply import read_ply, PlyError
from airspacegrid.objconvert import convert_ply_to_obj

mesh = read_ply("scan.ply")        # PlyMesh(vertices, triangles, source)
if mesh.is_valid():
    mesh.dump("scan-dump.txt")

convert_ply_to_obj("scan.ply", "scan.obj")
```

Binary files may be big- or little-endian. Vertices may be single or double precision. `read_ply` raises `PlyError` on a malformed or truncated file. `read_ply_faces(path)` and `write_obj(vertices, faces, face_count, stream)` expose the two halves of the conversion. The OBJ output writes the declared face count on its own before the 1-based face lines.

## Flight paths

```python
from airspacegrid.paths import load_path_file, path_segments
from airspacegrid.flight import FlightPlayback

points = load_path_file("route.txt")   # one "x y z" per line; origin points are skipped
segments = path_segments(points)

playback = FlightPlayback(points, speed=100.0)
while playback.moving:
    position = playback.step(0.016)
```

`parse_path_text(text)` parses text that is already in memory. `load_path_file` raises `FileNotFoundError` for a missing file.

## Block streaming

```python
from airspacegrid.streaming import BlockStreamer

streamer = BlockStreamer(block_size=1000, load_radius=10, map_size=100)
streamer.assign("tree-17", 1234.0, -560.0)
to_hide = streamer.first_load(0.0, 0.0)
update = streamer.update(5000.0, 0.0)
update.actors_to_hide, update.actors_to_show
```

`snap_to_block(value, block_size)` and `block_key(x, y)` give the block a point falls in.

## Messages and server

```python
from airspacegrid.messages import parse_message
from airspacegrid.server import ActionServer

with ActionServer(lambda body: print(parse_message(body)), host="127.0.0.1", port=8174) as server:
    print(server.address)
```

`parse_message` handles two actions:

- An `add` action yields `WeatherUpdate`, `PointFileUpdate` and `AirlineUpdate` values.
- A `get` action yields a `LocateRequest`.

Any other action yields an empty list. Text that is not a JSON object raises `MessageError`.

`ActionServer` answers `POST /action` with `{"status": "success"}` and passes the body to the callback. The default address is `0.0.0.0:174`. Use `start()` and `stop()`, or use the server as a context manager.

## What this package does not do

- It has no storage. Grids, point-file placements and flight lines live only in memory.
- It does not watch folders for new point-cloud files.
- It draws nothing.
- It has no command-line program.

Wiring messages to a grid, a store or a display is left to the caller.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.