[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emerge"
version = "0.1.0"
description = "Force-directed layout and live drawing of small directed graphs"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["graph", "visualization", "force-directed", "layout", "physics", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
emerge-simulator = "emerge.simulator:main"
emerge-country-chain = "emerge.country_chain:main"
emerge-builder = "emerge.builder:main"

[tool.hatch.build.targets.wheel]
packages = ["emerge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
