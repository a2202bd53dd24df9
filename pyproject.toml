[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "proptree"
version = "0.1.0"
description = "Hierarchical property trees with path access, value translation, JSON output and an INFO syntax checker"
requires-python = ">=3.10"
dependencies = []
keywords = ["property tree", "configuration", "json", "info", "tree"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[project.scripts]
proptree-info-check = "proptree.info_grammar:main"

[tool.hatch.build.targets.wheel]
packages = ["proptree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
