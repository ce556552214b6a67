[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multiorder"
version = "0.1.0"
description = "A small container that can be walked in insertion, sorted, reverse, side-cross and middle-out orders"
requires-python = ">=3.10"
dependencies = []
keywords = ["container", "iterator", "ordering", "side-cross", "middle-out"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
multiorder-demo = "multiorder.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["multiorder"]

[tool.pytest.ini_options]
addopts = "-ra"
