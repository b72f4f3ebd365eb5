[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adjgraph"
version = "0.1.0"
description = "Adjacency-list graphs with BFS, DFS, Dijkstra, Prim and Kruskal"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "adjacency list",
    "bfs",
    "dfs",
    "dijkstra",
    "prim",
    "kruskal",
    "minimum spanning tree",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adjgraph-demo = "adjgraph.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["adjgraph"]

[tool.pytest.ini_options]
addopts = "-ra"
