[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpncalc"
version = "1.0.0"
description = "A small reverse Polish notation calculator for single-digit operands, with coloured terminal helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpn", "calculator", "reverse polish notation", "postfix"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rpn = "rpncalc.cli:main"
rpncalc-hello = "rpncalc.hello:main"

[tool.hatch.build.targets.wheel]
packages = ["rpncalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
