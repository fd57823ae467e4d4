[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eacripper"
version = "0.1.0"
description = "Core services of a CD ripper: service UUIDs, settings, charset conversion, coder registry and component services"
requires-python = ">=3.10"
keywords = ["cd", "ripping", "cue", "charset", "codec", "components", "uuid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: CD Audio :: CD Ripping",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "charset-normalizer",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["eacripper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
