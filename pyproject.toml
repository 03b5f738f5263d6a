[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ravnica"
version = "0.1.0"
description = "A small HTTP API that searches Magic: The Gathering cards through Scryfall"
requires-python = ">=3.10"
keywords = ["scryfall", "magic the gathering", "cards", "api", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
ravnica = "ravnica.server:main"

[tool.hatch.build.targets.wheel]
packages = ["ravnica"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
