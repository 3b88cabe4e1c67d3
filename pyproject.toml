[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blahchat"
version = "0.1.0"
description = "A small console chat client with user accounts stored in text and binary files"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "console", "messaging", "accounts"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blahchat = "blahchat.app:main"

[tool.hatch.build.targets.wheel]
packages = ["blahchat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
