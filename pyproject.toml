[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imagestepper"
version = "0.1.0"
description = "File listing and depth-first directory stepping for a simple image viewer"
requires-python = ">=3.10"
dependencies = []
keywords = ["image", "viewer", "directory", "navigation", "filesystem"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
imagestepper = "imagestepper.commands:main"

[tool.hatch.build.targets.wheel]
packages = ["imagestepper"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
