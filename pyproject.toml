[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minutils"
version = "0.1.0"
description = "Small, dependency-free versions of classic Unix text utilities: cat, head, tail, wc, uniq, comm, cut, grep, find, fortune, cal and friends."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "unix",
    "coreutils",
    "cli",
    "cat",
    "head",
    "tail",
    "wc",
    "uniq",
    "comm",
    "cut",
    "grep",
    "find",
    "fortune",
    "cal",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hello = "minutils.hello:main"
mu-true = "minutils.hello:true_main"
mu-false = "minutils.hello:false_main"
echor = "minutils.echo:main"
catr = "minutils.cat:main"
headr = "minutils.head:main"
wcr = "minutils.wc:main"
uniqr = "minutils.uniq:main"
commr = "minutils.comm:main"
cutr = "minutils.cut:main"
grepr = "minutils.grep:main"
findr = "minutils.find:main"
tailr = "minutils.tail:main"
fortuner = "minutils.fortune:main"
calr = "minutils.cal:main"

[tool.hatch.build.targets.wheel]
packages = ["minutils"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
