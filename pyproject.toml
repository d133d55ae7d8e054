[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chronos_engine"
version = "0.1.0"
description = "Core runtime pieces of a small game engine: launch arguments, settings files, binary encoding, frame timing, logging and worker threads."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "settings", "frame timing", "profiling", "logging"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chronos_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
