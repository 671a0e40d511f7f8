[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arxiv_query"
version = "1.0.0"
description = "Client for the arXiv search API with a fluent query builder, retries, rate limiting and paginated iteration"
requires-python = ">=3.10"
dependencies = []
keywords = ["arxiv", "search", "atom", "papers", "api-client"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arxiv-query-demo = "arxiv_query.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["arxiv_query"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
