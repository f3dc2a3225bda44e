[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oauthcred"
version = "0.1.0"
description = "Configuration, data locations and settings for an OAuth-backed git credential helper"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "credential-helper", "oauth", "sqlite", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cred-default = "oauthcred.cred_default:main"

[tool.hatch.build.targets.wheel]
packages = ["oauthcred"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
