[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "foldprompt"
version = "0.1.0"
description = "A small desktop file manager that gathers selected files into a single text prompt"
requires-python = ">=3.10"
dependencies = []
keywords = ["file manager", "prompt", "tkinter", "context", "files"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
foldprompt = "foldprompt.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["foldprompt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
