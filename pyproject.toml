[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spinner"
version = "0.1.0"
description = "Spin algebra, symbolic model parameters and nonlinear fitting for magnetic spin systems"
requires-python = ">=3.10"
keywords = ["spin", "magnetism", "Heisenberg", "Clebsch-Gordan", "fitting", "physics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["spinner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
