[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rubrdesk"
version = "0.1.0"
description = "Tkinter screens for a rubric-based grading system: works, deadlines, criteria, grades and user lists."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "grading", "rubric", "assessment", "tkinter", "desktop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
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
rubrdesk = "rubrdesk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rubrdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
