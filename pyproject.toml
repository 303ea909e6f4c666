[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sowa"
version = "0.1.0"
description = "Core building blocks of a small 2D game engine: math, colours, timers, a virtual filesystem, input state, resources and project settings."
requires-python = ">=3.10"
keywords = ["game engine", "2d", "resources", "input", "filesystem", "yaml", "obj"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
    "pyyaml",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sowa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
