[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hdwallet32"
version = "0.1.0"
description = "Hierarchical deterministic wallet keys (BIP32) on secp256k1"
requires-python = ">=3.10"
keywords = ["bip32", "hd-wallet", "bitcoin", "secp256k1", "extended-keys", "base58"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hdwallet32"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
