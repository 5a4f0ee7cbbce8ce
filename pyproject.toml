[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tmgsampler"
version = "0.1.0"
description = "Exact Hamiltonian Monte Carlo sampling of truncated multivariate Gaussians under linear and quadratic constraints"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["hamiltonian monte carlo", "truncated gaussian", "sampling", "constraints", "linear algebra", "xml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tmgsampler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
