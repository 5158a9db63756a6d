[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simedit"
version = "0.1.0"
description = "Building blocks for a small modal terminal text editor: rune coding, documents, undo history, screen layout and raw terminal input"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text", "terminal", "utf-8", "undo", "layout"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["simedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
