[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainlist"
version = "1.0.0"
description = "A doubly linked list with index-based operations and optional element destructors"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "data structure", "container"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chainlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
