[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snowcalc"
version = "1.0.0"
description = "Trigonometric calculator built on Taylor and Maclaurin series, with a console menu and keypad state machines"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "trigonometry",
    "taylor series",
    "maclaurin",
    "calculator",
    "sin",
    "cos",
    "arcsin",
    "arctan",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snowcalc = "snowcalc.console:main"

[tool.hatch.build.targets.wheel]
packages = ["snowcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
