[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "indoprint"
version = "0.1.0"
description = "Ensemble weather forecasting building blocks for Indonesian cities: city lookup, forecast models, condition voting, weighted averaging, confidence scoring, caching and bounded concurrency."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "weather",
    "forecast",
    "ensemble",
    "indonesia",
    "confidence",
    "cache",
    "asyncio",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["indoprint"]

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
