[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dockcompose"
version = "0.1.0"
description = "Progress reporting, prompts and end-to-end test helpers for container orchestration command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["progress", "terminal", "spinner", "prompt", "e2e", "containers"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dockcompose"]

[tool.pytest.ini_options]
addopts = "-ra"
