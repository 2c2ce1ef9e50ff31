[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "truckroute"
version = "0.1.0"
description = "Grid city map, truck routes, greedy path finding and shipment capacity checks for a delivery service"
requires-python = ">=3.10"
dependencies = []
keywords = ["delivery", "routing", "grid", "map", "path-finding", "logistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
truckroute = "truckroute.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["truckroute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
