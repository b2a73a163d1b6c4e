[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goed"
version = "0.1.2"
description = "Core text, theme, event and syntax-highlighting building blocks of a terminal text editor"
requires-python = ">=3.11"
dependencies = []
keywords = ["editor", "terminal", "syntax-highlighting", "text", "crlf", "key-bindings"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["goed"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
