[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libmyprint"
version = "0.1.0"
description = "A printf-style formatter with its own flag rules, plus string and integer helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "formatting", "strings", "integers"]
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
packages = ["libmyprint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
