[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "texteditcore"
version = "0.1.0"
description = "Cursor, selection, key handling and undo/redo logic for embeddable text-editing widgets"
requires-python = ">=3.10"
dependencies = []
keywords = ["text editing", "widget", "undo", "redo", "cursor", "selection"]
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
    "Topic :: Text Editors",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["texteditcore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
