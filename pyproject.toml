[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numcalc"
version = "0.1.0"
description = "Classical numerical methods: dense matrices, linear solvers, decompositions, eigenvalues, root finding, optimisation and ODE integrators."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical methods",
    "linear equations",
    "eigenvalues",
    "ode",
    "root finding",
    "optimization",
    "matrix",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["numcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
