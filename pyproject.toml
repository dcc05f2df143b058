[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "marketkeeper"
version = "1.0.0"
description = "A console supermarket manager: products, customers, shopping carts and compact binary storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["supermarket", "inventory", "point-of-sale", "shopping-cart", "binary-format"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
marketkeeper = "marketkeeper.cli:main"

[tool.setuptools.packages.find]
include = ["marketkeeper*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
