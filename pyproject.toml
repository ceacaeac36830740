[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trainstation"
version = "0.1.0"
description = "Train station model: stations, trains, wagons, seat booking and discount cards"
requires-python = ">=3.10"
dependencies = []
keywords = ["train", "station", "railway", "timetable", "tickets", "schedule"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trainstation = "trainstation.users:main"

[tool.hatch.build.targets.wheel]
packages = ["trainstation"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
