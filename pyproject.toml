[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chronolog"
version = "0.1.0"
description = "Logging building blocks: fractional-second timestamps, a thread-safe queue, exception naming, stack dumps and latency bucketing"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "timestamp", "strftime", "queue", "stack dump", "latency", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chronolog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
