[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kvlab"
version = "0.1.0"
description = "Distributed-systems toolkit: a linearizability checker, a key/value model, value serialization, key/value message types and a MapReduce skeleton"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linearizability",
    "key-value",
    "mapreduce",
    "serialization",
    "distributed-systems",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kvlab-mrcoordinator = "kvlab.mr.coordinator:main"
kvlab-mrsequential = "kvlab.mr.sequential:main"

[tool.hatch.build.targets.wheel]
packages = ["kvlab"]

[tool.hatch.build.targets.sdist]
include = ["kvlab", "tests", "pyproject.toml"]

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
