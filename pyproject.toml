[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skischool"
version = "1.0.0"
description = "Manage a ski school: load students, assign them to courses and report the course overview."
requires-python = ">=3.10"
dependencies = []
keywords = ["ski school", "courses", "scheduling", "students", "teachers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
skischool = "skischool.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["skischool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
