[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "archkickstart"
version = "0.1.0"
description = "A small desktop window that installs and configures common packages and settings on Arch-based systems"
requires-python = ">=3.10"
keywords = ["arch", "pacman", "yay", "gnome", "setup", "post-install", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Installation/Setup",
]
dependencies = [
    "beautifulsoup4",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
archkickstart = "archkickstart.app:main"

[tool.hatch.build.targets.wheel]
packages = ["archkickstart"]

[tool.pytest.ini_options]
addopts = "-ra"
