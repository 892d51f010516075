[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "whimsy"
version = "0.1.0"
description = "Random memorable names built from plants, animals and colors"
requires-python = ">=3.10"
dependencies = []
keywords = ["names", "random", "naming", "infrastructure", "hostnames"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
whimsy-demo = "whimsy.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["whimsy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
