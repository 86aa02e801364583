[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubkit"
version = "0.1.0"
description = "Small text, memory and XPM image helpers: C-style string routines, a linked list, X11 colour names and an XPM pixmap reader"
requires-python = ">=3.10"
dependencies = []
keywords = ["xpm", "pixmap", "x11 colors", "strings", "linked list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
