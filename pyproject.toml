[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flightseats"
version = "1.0.0"
description = "Interactive flight seat map and passenger list manager"
requires-python = ">=3.10"
dependencies = []
keywords = ["flight", "seating", "passengers", "seat map", "booking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
flightseats = "flightseats.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["flightseats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
