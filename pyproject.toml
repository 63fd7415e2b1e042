[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noname_engine"
version = "0.1.0"
description = "Small engine core: nodes, systems and a per-node event dispatcher"
requires-python = ">=3.10"
keywords = ["engine", "events", "dispatcher", "nodes", "game"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
noname-engine-sample = "noname_engine.sample:main"

[tool.hatch.build.targets.wheel]
packages = ["noname_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
