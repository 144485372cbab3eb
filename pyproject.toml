[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keyden"
version = "0.1.7"
description = "A simple CLI and library for managing, rotating, and generating secret keys."
requires-python = ">=3.10"
dependencies = []
keywords = ["secret", "key-rotation", "cli", "token-management"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
keyden = "keyden.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["keyden"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
