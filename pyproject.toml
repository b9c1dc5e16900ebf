[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logform"
version = "0.6.2"
description = "Composable formats for log records: json, logstash, colorize, pad levels, pretty print and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "format", "log", "formatter", "colorize", "logstash"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["logform"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
