[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qgitcore"
version = "2.13"
description = "Core logic of a Git history viewer: patch filtering, ref ordering, file trees and settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "patch", "diff", "history", "viewer", "refs"]
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
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qgitcore = "qgitcore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qgitcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
