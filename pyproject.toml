[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagefetch"
version = "0.1.0"
description = "A small HTTP page fetcher with helper types for HTML and CSS layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "browser", "html", "css", "url", "encoding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Browsers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pagefetch = "pagefetch.client:main"

[tool.hatch.build.targets.wheel]
packages = ["pagefetch"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
