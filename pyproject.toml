[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "desktools"
version = "0.1.0"
description = "Small desktop tools: a status-line generator, a file-test filter and a menu matching engine"
requires-python = ">=3.10"
keywords = ["status", "statusbar", "monitoring", "menu", "launcher", "stest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
desktools-status = "desktools.status.cli:main"
desktools-stest = "desktools.stest:main"

[tool.hatch.build.targets.wheel]
packages = ["desktools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
