[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eaglecore"
version = "0.1.0"
description = "Core building blocks for a small game engine: event bus, input state, layers, buffers, file access and an application loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "event bus", "input", "layers", "application loop"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eaglecore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
