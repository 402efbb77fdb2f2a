[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mkjj-token"
version = "0.0.6"
description = "An in-memory fungible token ledger with allowances, ledger-based expiry and authorisation tracking"
requires-python = ">=3.10"
dependencies = []
keywords = ["token", "ledger", "allowance", "smart-contract", "simulation"]
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
    "Topic :: Office/Business :: Financial",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mkjj_token"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
