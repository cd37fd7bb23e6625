[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qosbrowser"
version = "0.1.0"
description = "Back-end core of an object-storage browser: request gateway, cloud manager, saved logins and content-auditing result models."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "object storage",
    "cos",
    "buckets",
    "file transfer",
    "content auditing",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: File Transfer Protocol (FTP)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qosbrowser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
