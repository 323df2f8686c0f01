[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dynamic_amm"
version = "0.6.1"
description = "Offline swap quoting, fee math and account address derivation for dynamic AMM pools and yield vaults"
requires-python = ">=3.10"
dependencies = []
keywords = ["amm", "swap", "quote", "stable-swap", "constant-product", "vault", "pda"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dynamic_amm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
