[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "okeslconf"
version = "1.0.0"
description = "Desktop editor for a game's console variables and key bindings"
requires-python = ">=3.10"
dependencies = []
keywords = ["config", "editor", "cvars", "keybindings", "game", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
okesl-config-ui = "okeslconf.app:main"

[tool.hatch.build.targets.wheel]
packages = ["okeslconf"]

[tool.pytest.ini_options]
addopts = "-ra"
