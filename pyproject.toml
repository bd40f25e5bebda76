[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ratiokit"
version = "1.0.0"
description = "Exact 64-bit rational ratios with SI and binary prefix names and a small dimension-checked physics toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["ratio", "rational", "fraction", "si-prefix", "binary-prefix", "units", "physics"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
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
ratiokit-physics = "ratiokit.physics:main"

[tool.hatch.build.targets.wheel]
packages = ["ratiokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
