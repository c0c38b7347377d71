[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weatherkit"
version = "2.8.0"
description = "City and weather forecast queries, forecast table models, a command-line forecast viewer and small container utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["weather", "forecast", "city", "query"]
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
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
weatherkit = "weatherkit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["weatherkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
