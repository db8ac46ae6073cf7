[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eulerkit"
version = "0.1.0"
description = "Solutions to early Project Euler problems, plus small GCD, LCM and calculator tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["project-euler", "number-theory", "math", "puzzles", "primes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eulerkit = "eulerkit.cli:main"
eulerkit-calc = "eulerkit.calculator:main"
eulerkit-gcd = "eulerkit.arith:gcd_main"
eulerkit-lcm = "eulerkit.arith:lcm_main"

[tool.hatch.build.targets.wheel]
packages = ["eulerkit"]

[tool.hatch.build.targets.sdist]
include = ["eulerkit", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
strict_optional = true
