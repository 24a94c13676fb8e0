[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixpaint"
version = "0.1.0"
description = "A small raster paint program with lines, circles, polygons, rectangles, an eraser and flood fill"
requires-python = ">=3.10"
keywords = ["paint", "raster", "drawing", "bresenham", "flood-fill", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixpaint = "pixpaint.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixpaint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
