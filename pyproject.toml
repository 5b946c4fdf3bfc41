[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lrucache"
version = "0.1.0"
description = "A small thread-safe least-recently-used cache"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "lru", "thread-safe"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lrucache-demo = "lrucache.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["lrucache"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
