[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ekaci"
version = "0.1.0"
description = "Continuous integration server, client and evaluator communicating over a unix socket"
requires-python = ">=3.10"
keywords = ["ci", "continuous-integration", "nix", "server", "unix-socket", "aiohttp"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: aiohttp",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]
dependencies = [
    "aiohttp>=3.8",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "pytest-asyncio>=0.21",
    "aiohttp>=3.8",
]

[project.scripts]
ekaci = "ekaci.client:main"
ekaci-server = "ekaci.server:main"
ekaci-evaluator = "ekaci.evaluator:main"

[tool.hatch.build.targets.wheel]
packages = ["ekaci"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
