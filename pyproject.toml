[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "galactous"
version = "0.1.0"
description = "Barnes-Hut galaxy simulation with an interactive 3D point viewer"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["n-body", "barnes-hut", "octree", "galaxy", "simulation", "gravity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
galactous = "galactous.viewer:main"

[tool.hatch.build.targets.wheel]
packages = ["galactous"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
