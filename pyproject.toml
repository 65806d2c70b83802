[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "biblioteca"
version = "0.1.0"
description = "Library catalogue records: users, materials and books kept in simple ordered lists."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "catalogue", "books", "users"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
biblioteca = "biblioteca.main:main"

[tool.hatch.build.targets.wheel]
packages = ["biblioteca"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
