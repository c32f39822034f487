[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estoque"
version = "1.0.0"
description = "Terminal stock control: products, stock movements and weighted average cost"
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "stock", "average-cost", "ledger", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estoque = "estoque.app:main"

[tool.hatch.build.targets.wheel]
packages = ["estoque"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
