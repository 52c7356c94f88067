[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mpc_engine"
version = "1.0.0"
description = "Session state, configuration, bearer-token metadata and logging building blocks for a multi-party computation engine."
requires-python = ">=3.11"
dependencies = []
keywords = ["mpc", "threshold-signatures", "session", "configuration", "bearer-token", "logging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mpc_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
