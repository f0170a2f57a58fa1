[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sniffkit"
version = "1.2.0"
description = "Localized interface texts, traffic formatting helpers and release checks for a network traffic monitor"
requires-python = ">=3.10"
keywords = [
    "network",
    "traffic",
    "monitoring",
    "localization",
    "translations",
    "formatting",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Natural Language :: English",
    "Natural Language :: Italian",
    "Natural Language :: French",
    "Natural Language :: Spanish",
    "Natural Language :: Polish",
    "Natural Language :: German",
    "Natural Language :: Ukrainian",
    "Natural Language :: Chinese (Simplified)",
    "Natural Language :: Romanian",
    "Natural Language :: Korean",
    "Natural Language :: Portuguese",
    "Natural Language :: Turkish",
    "Natural Language :: Russian",
    "Natural Language :: Greek",
    "Natural Language :: Persian",
    "Natural Language :: Swedish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]
dependencies = [
    "requests>=2.28",
    "platformdirs>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["sniffkit"]

[tool.hatch.build.targets.sdist]
include = [
    "sniffkit",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
