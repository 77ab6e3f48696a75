[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shadekit"
version = "0.1.0"
description = "Scene transforms, surface mixing, Disney BSDF lobes and metal IOR tables for 3D rendering"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["rendering", "bsdf", "transforms", "disney", "ior", "spectral"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["shadekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
