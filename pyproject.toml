[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chaumpedersen"
version = "0.1.0"
description = "Chaum-Pedersen zero-knowledge password authentication: protocol arithmetic, an in-memory auth service and a client."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "zero-knowledge",
    "zkp",
    "chaum-pedersen",
    "authentication",
    "discrete-logarithm",
    "cryptography",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chaumpedersen-client = "chaumpedersen.client:main"

[tool.hatch.build.targets.wheel]
packages = ["chaumpedersen"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
