[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lineedit"
version = "0.1.0"
description = "Line-editor core: edit commands, events, Emacs and Vi key handling, hint tokens and highlighting"
requires-python = ">=3.10"
keywords = ["line editor", "readline", "vi", "emacs", "keybindings", "terminal"]
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
    "Topic :: Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "regex",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lineedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
