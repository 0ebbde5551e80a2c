[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tokshell"
version = "0.1.0"
description = "An interactive prompt that splits command lines into shell tokens, with a small string, memory and I/O helper library"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "lexer", "tokenizer", "repl", "command line"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tokshell = "tokshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["tokshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
