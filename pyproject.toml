[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mygrep"
version = "0.1.0"
description = "A small grep-like fixed-string search tool with coloured match highlighting"
requires-python = ">=3.10"
dependencies = []
keywords = ["grep", "search", "text", "filter", "cli"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mygrep = "mygrep.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mygrep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
