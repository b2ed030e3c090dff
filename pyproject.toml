[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdstdio"
version = "0.1.0"
description = "C-style printf and scanf formatting and parsing for Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["stdio", "printf", "scanf", "sprintf", "sscanf", "formatting", "parsing"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pdstdio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
