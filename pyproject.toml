[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternworks"
version = "0.1.0"
description = "Small, runnable models of classic object-oriented design patterns and low-level design exercises"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "low-level-design",
    "flyweight",
    "mediator",
    "state-machine",
    "prototype",
    "strategy",
    "observer",
    "expense-splitting",
    "tic-tac-toe",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternworks-flyweight = "patternworks.flyweight:main"
patternworks-splitwise = "patternworks.splitwise:main"
patternworks-vending = "patternworks.vending:main"
patternworks-tictactoe = "patternworks.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["patternworks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
