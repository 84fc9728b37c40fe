[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enumsrc"
version = "0.4.2"
description = "Content sources for enum definitions: read from files, file systems or any readable stream."
requires-python = ">=3.10"
dependencies = []
keywords = ["enum", "code generation", "source", "reader"]
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
    "Topic :: Software Development :: Code Generators",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enumsrc"]

[tool.pytest.ini_options]
addopts = "-ra"
