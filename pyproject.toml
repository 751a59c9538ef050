[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cgifh"
version = "0.0.1"
description = "Drawing into palette-indexed bitmaps: lines, rectangles, ellipses and a small bitmap font"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitmap", "palette", "indexed-colour", "drawing", "font", "raster"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cgifh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
