[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poseidon-merkle"
version = "0.1.0"
description = "Incremental Merkle tree over the BN254 scalar field using the circom-compatible Poseidon hash"
requires-python = ">=3.10"
dependencies = []
keywords = ["poseidon", "merkle", "bn254", "zero-knowledge", "circom", "hash"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["poseidon_merkle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
