[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qmkonnect"
version = "0.1.0"
description = "Window activity notifier for QMK keyboards"
requires-python = ">=3.11"
dependencies = []
keywords = ["qmk", "keyboard", "window", "focus", "notifier", "debounce", "udev"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qmkonnect = "qmkonnect.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qmkonnect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
