[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursemgr"
version = "0.1.0"
description = "Interactive course management: courses, topics, tests and JSON save/load"
requires-python = ">=3.10"
dependencies = []
keywords = ["courses", "education", "topics", "cli", "json"]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursemgr = "coursemgr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coursemgr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
