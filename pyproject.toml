[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "etudes"
version = "1.0.0"
description = "Small studies: weighted graphs with a word-bridging poet, turtle geometry, and a minesweeper board with a TLS relay server and client"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "poetry", "turtle", "geometry", "minesweeper", "tls"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "cryptography",
]

[project.scripts]
etudes-poet = "etudes.poetic.poet:main"
etudes-turtle = "etudes.turtlegfx.soup:main"
etudes-minesweeper-server = "etudes.minesweeper.server:main"
etudes-minesweeper-client = "etudes.minesweeper.client:main"

[tool.hatch.build.targets.wheel]
packages = ["etudes"]

[tool.hatch.build.targets.sdist]
include = ["etudes", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
