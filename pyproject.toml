[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "proptree"
version = "1.0.0"
description = "Hierarchical property trees with INI and INFO reading and INI and XML writing"
requires-python = ">=3.10"
dependencies = []
keywords = ["property tree", "configuration", "ini", "info", "xml", "settings"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
proptree-settings = "proptree.settings:main"

[tool.setuptools.packages.find]
include = ["proptree*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
