[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hwhash"
version = "0.1.0"
description = "Pure Python HighwayHash (64/128/256-bit) and SipHash keyed hash functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hash",
    "highwayhash",
    "siphash",
    "keyed-hash",
    "prf",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hwhash = "hwhash.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hwhash"]

[tool.hatch.build.targets.sdist]
include = ["hwhash", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
