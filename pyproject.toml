[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dgengine"
version = "0.1.0"
description = "A small state-driven application framework with 3D math, named colours, input handling and a simulated window and render loop"
requires-python = ">=3.10"
dependencies = []
keywords = ["app states", "main loop", "vector", "matrix", "quaternion", "colors", "input"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dgengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
