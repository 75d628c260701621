[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minishkit"
version = "0.1.0"
description = "String, number, memory, list and line-reading helpers plus shell-builtin environment and argument logic"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "strings", "environment", "parsing", "printf", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minishkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
