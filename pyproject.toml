[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "helga"
version = "0.1.0"
description = "Loads and validates cluster and Artifactory configuration and picks the newest Helm packages per namespace"
requires-python = ">=3.10"
keywords = ["helm", "artifactory", "aql", "kubernetes", "configuration", "ci-cd"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]
dependencies = [
    "pyyaml",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
helga = "helga.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["helga"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
