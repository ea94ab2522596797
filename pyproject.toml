[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kipisi"
version = "0.1.0"
description = "A small pygame window that draws sitelen pona glyphs from an 8x8 sprite sheet"
requires-python = ">=3.10"
keywords = ["toki pona", "sitelen pona", "sprites", "pygame", "pixel art"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kipisi = "kipisi.app:main"

[tool.hatch.build.targets.wheel]
packages = ["kipisi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
