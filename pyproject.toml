[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "airspacegrid"
version = "0.1.0"
description = "Airspace grid modelling: octree obstacle cells, geo/world coordinates, weather reports, PLY point clouds, flight paths and an action-message endpoint"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "airspace",
    "octree",
    "grid",
    "ply",
    "obj",
    "point-cloud",
    "weather",
    "flight-path",
    "gis",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["airspacegrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
