[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "towercomb"
version = "0.0.1"
description = "Game rules for a side-view tower defence game: levels, waves, camera, animation and HUD state"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tower-defense", "strategy", "simulation", "level-parsing"]
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
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["towercomb"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
