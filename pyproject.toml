[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptosim"
version = "0.1.0"
description = "Terminal crypto trading simulator with a virtual balance, portfolio and transaction history"
requires-python = ">=3.10"
dependencies = []
keywords = ["crypto", "simulator", "portfolio", "trading", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cryptosim = "cryptosim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptosim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
