[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "btmesh"
version = "0.1.0"
description = "Bluetooth Mesh value types: mesh counters and indices, lower transport segments, foundation states, publication timing, health faults and sequence counters."
requires-python = ">=3.10"
dependencies = []
keywords = ["bluetooth", "mesh", "ble", "protocol", "iot"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["btmesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
