[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linetally"
version = "0.1.0"
description = "Count effective lines, keywords and comments in C-like source files using parallel worker threads"
requires-python = ">=3.10"
dependencies = []
keywords = ["source metrics", "line counting", "threads", "barrier", "semaphore", "static analysis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linetally = "linetally.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linetally"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
