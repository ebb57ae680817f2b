[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exodus"
version = "0.1.0"
description = "A tile-based exploration game, with a tool that exports its plant data to TOML."
requires-python = ">=3.11"
keywords = ["game", "roguelike", "tiles", "pygame", "toml", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
exodus = "exodus.game:main"
exodus-data = "exodus.datamanager:main"

[tool.hatch.build.targets.wheel]
packages = ["exodus"]

[tool.pytest.ini_options]
addopts = "-ra"
