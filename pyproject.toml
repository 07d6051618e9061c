[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aedsuite"
version = "0.1.0"
description = "Student timetable management and flight network route planning from CSV data"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "timetable",
    "schedule",
    "enrolment",
    "students",
    "flights",
    "airports",
    "graph",
    "routes",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aedsuite-schedule = "aedsuite.schedule_cli:main"
aedsuite-flights = "aedsuite.flights_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aedsuite"]

[tool.pytest.ini_options]
addopts = "-ra"
