[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termcore"
version = "0.1.0"
description = "Building blocks for terminal emulators: color schemes, text filters and hotspots, combined-character keys and history search"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["terminal", "emulator", "color-scheme", "palette", "hotspot", "url", "search"]
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
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["termcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
