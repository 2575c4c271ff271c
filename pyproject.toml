[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "visol"
version = "1.0.0"
description = "A small application framework with typed event dispatch, input state, a pyglet window layer, loggers, 3D vector math and an ASCII rasterizer."
requires-python = ">=3.10"
dependencies = [
    "pyglet",
]
keywords = [
    "engine",
    "events",
    "input",
    "window",
    "logging",
    "vector-math",
    "projection",
    "ascii-rendering",
]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
visol = "visol.application:main"
visol-log-demo = "visol.async_logger:main"
visol-cube = "visol.raster:main"

[tool.hatch.build.targets.wheel]
packages = ["visol"]

[tool.hatch.build.targets.sdist]
include = [
    "visol",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
