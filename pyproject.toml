[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csesgraphs"
version = "0.1.0"
description = "Grid and graph algorithms for classic problems: rooms, labyrinths, monsters, shortest routes, high scores and negative cycles."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graphs",
    "algorithms",
    "bfs",
    "dfs",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "topological-sort",
    "competitive-programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
csesgraphs = "csesgraphs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["csesgraphs"]

[tool.pytest.ini_options]
addopts = "-ra"
