[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "helpdesk"
version = "0.1.0"
description = "A small help-desk ticket system: users, technicians, a ticket queue, distribution and reports."
requires-python = ">=3.10"
keywords = ["helpdesk", "tickets", "queue", "technicians", "support"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
helpdesk = "helpdesk.manager:main"

[tool.hatch.build.targets.wheel]
packages = ["helpdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
