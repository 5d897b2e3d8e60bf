[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vouwbank"
version = "0.1.0"
description = "Press brake (sheet metal bending) job planner and simulator with a desktop interface"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["cnc", "press brake", "sheet metal", "bending", "simulation", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Manufacturing",
    "Natural Language :: Dutch",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
vouwbank = "vouwbank.app:main"

[tool.hatch.build.targets.wheel]
packages = ["vouwbank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
