[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tourneyhub"
version = "0.1.0"
description = "Tournament management service layer: teams, tournaments, groups and matches behind a small HTTP-style router"
requires-python = ">=3.10"
dependencies = []
keywords = ["tournament", "teams", "groups", "matches", "rest", "service"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tourneyhub"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
