[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osalgos"
version = "0.1.0"
description = "Simulations of classic operating-system algorithms: CPU and disk scheduling, page replacement, memory allocation, deadlock avoidance, pipes and readers-writers synchronisation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-systems",
    "cpu-scheduling",
    "page-replacement",
    "disk-scheduling",
    "bankers-algorithm",
    "memory-allocation",
    "readers-writers",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osalgos-cpu = "osalgos.cpu_scheduling:main"
osalgos-pages = "osalgos.page_replacement:main"
osalgos-disk = "osalgos.disk_scheduling:main"
osalgos-memory = "osalgos.memory_allocation:main"
osalgos-bankers = "osalgos.bankers:main"
osalgos-files = "osalgos.fileutils:main"
osalgos-ipc = "osalgos.ipc:main"
osalgos-rw = "osalgos.readers_writers:main"

[tool.hatch.build.targets.wheel]
packages = ["osalgos"]

[tool.hatch.build.targets.sdist]
include = ["osalgos", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
