[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consolecalc"
version = "0.1.0"
description = "A small interactive console with an arithmetic expression calculator"
requires-python = ">=3.10"
keywords = ["calculator", "console", "shell", "arithmetic", "repl"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consolecalc = "consolecalc.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["consolecalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
