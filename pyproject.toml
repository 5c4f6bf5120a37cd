[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "festcal"
version = "2.0.0"
description = "Holiday definitions and occurrence calculations for a range of countries"
requires-python = ">=3.10"
dependencies = []
keywords = ["holidays", "calendar", "easter", "bank holidays", "public holidays"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["festcal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
