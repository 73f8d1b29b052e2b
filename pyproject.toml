[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "callprof"
version = "0.1.0"
description = "Per-function call counts and time totals for Python programs, with a sorted report at exit"
requires-python = ">=3.10"
dependencies = []
keywords = ["profiler", "profiling", "instrumentation", "call counts", "timing", "benchmark"]
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
    "Topic :: Software Development :: Debuggers",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
callprof-workload = "callprof.workload:main"
callprof-workload-loop = "callprof.workload:main_loop"
callprof-example = "callprof.examples:example_main"
callprof-basic = "callprof.examples:basic_main"
callprof-sorting = "callprof.examples:sorting_main"
callprof-matrix = "callprof.examples:matrix_main"
callprof-strings = "callprof.examples:strings_main"

[tool.hatch.build.targets.wheel]
packages = ["callprof"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
