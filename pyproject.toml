[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reumes"
version = "0.1.0"
description = "A resume data model in the JSON Resume layout, loaded from YAML or JSON"
requires-python = ">=3.10"
keywords = ["resume", "cv", "yaml", "json-resume"]
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
    "Topic :: Office/Business",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["reumes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
