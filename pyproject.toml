[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loganizer"
version = "0.1.0"
description = "Check many log files concurrently from a JSON configuration and report the results"
requires-python = ">=3.10"
dependencies = []
keywords = ["logs", "log-analysis", "cli", "concurrency", "report"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Log Analysis",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
loganalyzer = "loganizer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["loganizer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
