[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kon"
version = "0.1.0"
description = "Small building blocks: strict prefix number parsing, buffer views, optional values, string splitting and a variable-length message ring."
requires-python = ">=3.10"
dependencies = []
keywords = ["parsing", "ring-buffer", "buffer", "optional", "utilities"]
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
packages = ["kon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
