[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "texstream"
version = "0.1.0"
description = "Streams procedurally drawn pixel patterns into a live texture window"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["texture", "procedural", "flood-fill", "graphics", "demo", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
texstream = "texstream.app:main"

[tool.hatch.build.targets.wheel]
packages = ["texstream"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
