[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridstash"
version = "0.1.0"
description = "A spatial, grid-based game inventory: item manifests, fragments, stacking, hover and drag placement."
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "game", "grid", "stacking", "items"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gridstash"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
