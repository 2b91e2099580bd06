[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "relaydb"
version = "0.1.0"
description = "SQLite data access layer for relay close counters, with retention sweeping and small buffer utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "dao", "relay", "retention", "buffer"]
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

[tool.setuptools]
packages = ["relaydb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
