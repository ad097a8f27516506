[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wnpkg"
version = "0.1.0"
description = "Package a Node.js project into a folder with a native launcher executable"
requires-python = ">=3.10"
dependencies = []
keywords = ["nodejs", "packaging", "launcher", "executable", "build"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wnpkg = "wnpkg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wnpkg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
