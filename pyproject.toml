[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numethods"
version = "0.1.0"
description = "Classic numerical methods: LU linear solver, quadrature, least-squares approximation, Newton interpolation and ODE steppers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical methods",
    "lu decomposition",
    "integration",
    "interpolation",
    "approximation",
    "differential equations",
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

[project.scripts]
numethods-circuit = "numethods.circuit:main"

[tool.hatch.build.targets.wheel]
packages = ["numethods"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
