[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastlanefury"
version = "0.1.0"
description = "Highway traffic simulation with sensor-driven vehicles running as periodic tasks"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "simulation",
    "traffic",
    "highway",
    "periodic-tasks",
    "game",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fastlanefury = "fastlanefury.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fastlanefury"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
