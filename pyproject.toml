[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "librarysys"
version = "0.1.0"
description = "Domain model and JSON persistence for a small library management system"
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "loans", "reservations", "catalog", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["librarysys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
