[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edgeboot"
version = "0.1.0"
description = "Bootstrap helpers for edge services: configuration types, dependency injection, a startup timer, a secrets file format and an insecure secret provider."
requires-python = ">=3.10"
keywords = ["bootstrap", "dependency-injection", "secrets", "configuration", "edge"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["edgeboot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
