[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drills"
version = "0.1.0"
description = "Small classic programming exercises: averages, grades, number theory, text patterns, matrices and calculators"
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "education", "patterns", "matrix", "calculator", "primes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drills-basics = "drills.basics:main"
drills-numtheory = "drills.numtheory:main"
drills-patterns = "drills.patterns:main"
drills-matrix = "drills.matrix:main"
drills-calculator = "drills.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["drills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
