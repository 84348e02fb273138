[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mediakit"
version = "0.1.0"
description = "A small film library with authors, viewing rules and country restrictions, plus generic matrix images that can be enlarged and rotated"
requires-python = ">=3.10"
dependencies = []
keywords = ["film", "library", "authors", "matrix", "image", "pixel", "rotation", "nearest-neighbour"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mediakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
