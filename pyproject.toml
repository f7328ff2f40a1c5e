[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minivim"
version = "0.1.0"
description = "A small modal terminal text editor with vi-style keys and C/C++ syntax highlighting"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "vi", "modal", "curses", "terminal", "syntax-highlighting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
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

[project.scripts]
minivim = "minivim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["minivim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
