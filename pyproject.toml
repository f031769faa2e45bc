[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hypervolume"
version = "0.1.0"
description = "Monte Carlo estimation of volumes of k-dimensional shapes"
requires-python = ">=3.10"
dependencies = []
keywords = ["monte carlo", "volume", "hypersphere", "simulation", "numerical integration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
hypervolume = "hypervolume.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hypervolume"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
