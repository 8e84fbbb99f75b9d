[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cooklang"
version = "0.17.11"
description = "Cooklang aisle configuration parser, recipe model types and quantity helpers"
requires-python = ">=3.10"
keywords = ["cooklang", "cooking", "recipes", "shopping list", "aisle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Markup",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cooklang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
