[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vroomrender"
version = "1.0.0"
description = "Render styles, extents, rubber-band selection, text serialization and overlays for GIS map viewers"
requires-python = ">=3.10"
dependencies = []
keywords = ["gis", "rendering", "map", "symbology", "coltop", "extent"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vroomrender"]

[tool.pytest.ini_options]
addopts = "-ra"
