[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nutrix"
version = "0.1.0"
description = "Point-of-sale business services backed by MongoDB: products, customers, categories, sales, logs, settings and notifications"
requires-python = ">=3.10"
keywords = ["pos", "point-of-sale", "restaurant", "recipes", "mongodb"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]
dependencies = [
    "pymongo",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nutrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
