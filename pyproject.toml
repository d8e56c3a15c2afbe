[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cogwire"
version = "0.1.0"
description = "Newline-delimited JSON request/response protocol for workspace services, with a Unix domain socket server"
requires-python = ">=3.10"
dependencies = []
keywords = ["ndjson", "json-lines", "protocol", "unix-socket", "asyncio", "rpc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Internet",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["cogwire"]

[tool.hatch.build.targets.sdist]
include = ["cogwire", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
