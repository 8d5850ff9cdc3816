[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainlog"
version = "0.1.0"
description = "A tamper-evident, hash-chained log server with proof-of-work clients and a chain checker"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "hash chain", "sha256", "proof of work", "tamper evident", "base64"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chainlog-server = "chainlog.server:main"
chainlog-log = "chainlog.client:main"
chainlog-check = "chainlog.checklog:main"
chainlog-b64hash = "chainlog.b64hash:main"

[tool.hatch.build.targets.wheel]
packages = ["chainlog"]

[tool.pytest.ini_options]
addopts = "-ra"
