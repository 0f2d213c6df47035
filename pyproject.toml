[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "syslab"
version = "0.1.0"
description = "Small systems-programming exercises: CPU scheduling, file appending, process launching, and socket clients and servers"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "fcfs", "sjf", "sockets", "udp", "tcp", "daytime", "echo", "chat", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
syslab-schedule = "syslab.scheduling:main"
syslab-append = "syslab.fileappend:main"
syslab-run = "syslab.launcher:main"
syslab-chat = "syslab.chat:main"
syslab-daytime = "syslab.daytime:main"
syslab-echo = "syslab.echo:main"

[tool.hatch.build.targets.wheel]
packages = ["syslab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
