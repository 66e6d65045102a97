[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uuid-extra"
version = "0.0.2"
description = "Minimalist UUID utilities: v4/v7 generation and Base58/Base64 encoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["uuid", "uuidv7", "base58", "base64", "identifiers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uuid_extra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
