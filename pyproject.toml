[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "netvis"
version = "0.1.0"
description = "Lay out and explore undirected networks read from plain edge-list files"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "network",
    "graph",
    "visualization",
    "layout",
    "force-directed",
    "edge list",
    "tkinter",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netvis = "netvis.app:main"

[tool.setuptools]
packages = ["netvis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
