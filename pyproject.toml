[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rapidtlv"
version = "0.1.1"
description = "Compact type-length-value message encoding and parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["tlv", "protocol", "binary", "serialization", "encoding"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rapidtlv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
