[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ethiotime"
version = "0.1.0"
description = "Ethiopian calendar dates and times with Amharic layout-based formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["ethiopian", "calendar", "amharic", "date", "time", "formatting"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ethiotime"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
