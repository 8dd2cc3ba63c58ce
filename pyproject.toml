[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typeroute"
version = "0.1.0"
description = "Type mappings and value conversions that route database column types to Arrow column types"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "arrow", "typesystem", "conversion", "dataframe"]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["typeroute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
