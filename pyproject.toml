[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fmtprintf"
version = "0.1.0"
description = "A small printf-style formatter supporting c, s, p, d, i, u, x, X, b, o and % conversions with flags, width and precision."
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "format", "string", "text", "padding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fmtprintf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
