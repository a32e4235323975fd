[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rialtotimer"
version = "1.0.0"
description = "Cancellable one-shot and periodic timers running callbacks on a background thread"
requires-python = ">=3.10"
dependencies = []
keywords = ["timer", "threading", "periodic", "callback", "one-shot"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rialtotimer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
