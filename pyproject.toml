[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termadoro"
version = "0.1.0"
description = "A terminal pomodoro timer with an animated clock head and a spoken alarm"
requires-python = ">=3.10"
keywords = ["pomodoro", "timer", "terminal", "productivity", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: MacOS",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tdoro = "termadoro.tdoro:main"

[tool.hatch.build.targets.wheel]
packages = ["termadoro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
